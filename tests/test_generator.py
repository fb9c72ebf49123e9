"""End-to-end tests: decorate a record, call the generated setters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Optional

import pytest
from pydantic import BaseModel, ConfigDict

from asker import (
    AskerConfig,
    ConfigurationError,
    GenerationError,
    InteractionError,
    OptionError,
    ShapeMismatchError,
    asker,
    directive,
    generate_methods,
    generated_method,
    generated_source,
    prompt_field,
)
from asker.core.theme import COLORFUL_STYLE, PLAIN_STYLE


class Color(Enum):
    RED = "red"
    GREEN = "green"


# -- end-to-end scenarios ----------------------------------------------------


class TestScenarios:
    def test_select_with_static_prompt_and_options(self, prompts):
        @asker
        @dataclass
        class Pick:
            choice: str = prompt_field(directive("select", prompt="Pick", options=["a", "b", "c"]), default="")

        method = generated_method(Pick, "choice")
        assert method.params == ()
        assert "['a', 'b', 'c']" in method.source
        assert "default=" not in method.source

        prompts.answer("select", 2)
        pick = Pick()
        assert pick.ask_choice() is pick
        assert pick.choice == "c"

        factory, kwargs = prompts.last
        assert factory == "select"
        assert kwargs["message"] == "Pick"
        assert "default" not in kwargs
        assert [c.value for c in kwargs["choices"]] == [0, 1, 2]
        assert [c.name for c in kwargs["choices"]] == ["a", "b", "c"]
        assert kwargs["style"] is COLORFUL_STYLE

    def test_untagged_list_needs_prompt_and_options(self, prompts):
        @asker
        @dataclass
        class Post:
            tags: list[str] = field(default_factory=list)

        assert generated_method(Post, "tags").kind == "multiselect"
        assert generated_method(Post, "tags").params == ("prompt", "options")

        prompts.answer("checkbox", [0, 2])
        post = Post().ask_tags("Tags", ["x", "y", "z"])
        assert post.tags == ["x", "z"]

        _, kwargs = prompts.last
        assert kwargs["message"] == "Tags"
        assert not any(c.enabled for c in kwargs["choices"])

    def test_optional_confirm_with_default(self, prompts):
        @asker
        @dataclass
        class Check:
            ok: Optional[bool] = prompt_field(directive("confirm", default=True), default=None)

        assert generated_method(Check, "ok").params == ("prompt",)

        prompts.answer("confirm", False)
        check = Check().ask_ok("Continue?")
        assert check.ok is False
        _, kwargs = prompts.last
        assert kwargs["default"] is True
        assert kwargs["message"] == "Continue?"

    def test_password_on_integer_fails(self):
        with pytest.raises(GenerationError) as excinfo:

            @asker
            @dataclass
            class Vault:
                secret: int = prompt_field(directive("password"), default=0)

        error = excinfo.value
        assert len(error.errors) == 1
        assert isinstance(error.errors[0], ShapeMismatchError)
        assert error.errors[0].field == "secret"
        assert "`int`" in str(error)


# -- runtime behaviour -------------------------------------------------------


@asker
@dataclass
class Deploy:
    name: str = ""
    region: str = prompt_field(directive("select", prompt="Region", options=["eu", "us"], default=1), default="eu")
    replicas: int = 1
    color: Color = prompt_field(directive("select", options=["red", "green"]), default=Color.RED)
    size: Optional[int] = prompt_field(directive("select", prompt="Size", options=[1, 2, 4]), default=None)
    token: Annotated[Optional[str], directive("password", prompt="Token")] = None
    public: bool = False
    features: list[Color] = prompt_field(
        directive("multiselect", prompt="Features", options=["red", "green"], defaults=[1]),
        default_factory=list,
    )


class TestGeneratedMethods:
    def test_chaining(self, prompts):
        prompts.answer("text", "api")
        prompts.answer("select", 0)
        prompts.answer("confirm", True)
        deploy = Deploy().ask_name("Name").ask_region().ask_public("Public?")
        assert (deploy.name, deploy.region, deploy.public) == ("api", "eu", True)

    def test_select_default_index(self, prompts):
        prompts.answer("select", 1)
        Deploy().ask_region()
        assert prompts.last[1]["default"] == 1

    def test_input_converts_answer(self, prompts):
        prompts.answer("text", "3")
        deploy = Deploy().ask_replicas("Replicas")
        assert deploy.replicas == 3

        validate = prompts.last[1]["validate"]
        assert validate("7") is True
        assert validate("seven") is False

    def test_select_widens_into_enum(self, prompts):
        prompts.answer("select", 1)
        assert Deploy().ask_color("Color").color is Color.GREEN

    def test_optional_select(self, prompts):
        prompts.answer("select", 2)
        assert Deploy().ask_size().size == 4

    def test_annotated_password(self, prompts):
        prompts.answer("secret", "s3cret")
        deploy = Deploy().ask_token()
        assert deploy.token == "s3cret"
        factory, kwargs = prompts.last
        assert factory == "secret"
        assert kwargs["message"] == "Token"

    def test_multiselect_defaults_and_conversion(self, prompts):
        prompts.answer("checkbox", [0, 1])
        deploy = Deploy().ask_features()
        assert deploy.features == [Color.RED, Color.GREEN]
        assert [c.enabled for c in prompts.last[1]["choices"]] == [False, True]

    def test_call_time_options_are_checked_before_prompting(self, prompts):
        @asker
        @dataclass
        class Service:
            port: int = prompt_field(directive("select", prompt="Port"), default=80)

        with pytest.raises(OptionError, match="option 'http' is not compatible with `int`") as excinfo:
            Service().ask_port(["http", "https"])
        assert excinfo.value.field == "port"
        assert prompts.calls == []

        prompts.answer("select", 1)
        assert Service().ask_port(["80", 443]).port == 443

    def test_cancelled_prompt_raises(self, prompts):
        prompts.answer("text", KeyboardInterrupt())
        deploy = Deploy(name="kept")
        with pytest.raises(InteractionError) as excinfo:
            deploy.ask_name("Name")
        assert excinfo.value.field == "name"
        assert isinstance(excinfo.value.__cause__, KeyboardInterrupt)
        assert deploy.name == "kept"

    def test_generated_source(self):
        source = generated_source(Deploy)
        assert "def ask_name(self, prompt: str):" in source
        assert "def ask_region(self):" in source
        assert len(Deploy.__asker_methods__) == 8


class TestFailurePolicy:
    def test_exit_on_failure(self, prompts):
        @asker(config=AskerConfig(on_failure="exit"))
        @dataclass
        class Script:
            name: str = ""

        prompts.answer("text", EOFError())
        with pytest.raises(SystemExit) as excinfo:
            Script().ask_name("Name")
        assert excinfo.value.code == 1


# -- pydantic records and themes ---------------------------------------------


class TestPydanticRecords:
    def test_model_fields(self, prompts):
        @asker(theme="none")
        class Account(BaseModel):
            user: str = ""
            token: Annotated[Optional[str], directive("password", prompt="Token")] = None
            admin: bool = False

        prompts.answer("secret", "abc")
        prompts.answer("confirm", True)
        account = Account().ask_token().ask_admin("Admin?")
        assert account.token == "abc"
        assert account.admin is True
        assert prompts.last[1]["style"] is PLAIN_STYLE

    def test_frozen_model_is_rejected(self):
        with pytest.raises(ConfigurationError, match="frozen"):

            @asker
            class Frozen(BaseModel):
                model_config = ConfigDict(frozen=True)
                name: str = ""


class TestThemeSelection:
    def test_environment_theme(self, prompts, monkeypatch):
        monkeypatch.setenv("ASKER_THEME", "none")

        @asker
        @dataclass
        class Plain:
            name: str = ""

        assert "style=PLAIN_STYLE" in generated_method(Plain, "name").source

    def test_record_theme_beats_config(self):
        @asker(theme="colorful", config=AskerConfig(theme="none"))
        @dataclass
        class Loud:
            name: str = ""

        assert "style=COLORFUL_STYLE" in generated_method(Loud, "name").source

    def test_external_theme(self, prompts):
        @asker(theme="external", style={"answer": "#ff00ff"})
        @dataclass
        class Custom:
            name: str = ""

        prompts.answer("text", "x")
        Custom().ask_name("Name")
        assert prompts.last[1]["style"].dict["answer"] == "#ff00ff"


# -- generation failures -----------------------------------------------------


class TestGenerationFailures:
    def test_no_partial_output(self):
        @dataclass
        class Broken:
            name: str = ""
            flag: str = prompt_field(directive("confirm"), default="")
            tags: str = prompt_field(directive("multiselect"), default="")

        with pytest.raises(GenerationError) as excinfo:
            asker(Broken)

        error = excinfo.value
        assert error.fields == ["flag", "tags"]
        assert error.get_error_summary() == {"ShapeMismatchError": 2}
        assert error.record == "Broken"
        assert not hasattr(Broken, "ask_name")
        assert not hasattr(Broken, "__asker_methods__")

    def test_container_fields_cannot_take_text(self):
        @dataclass
        class Labels:
            tags: Optional[list[str]] = None
            labels: list[str] = prompt_field(directive("input", prompt="Labels"), default_factory=list)
            meta: dict[str, int] = field(default_factory=dict)

        with pytest.raises(GenerationError) as excinfo:
            asker(Labels)

        assert excinfo.value.fields == ["tags", "labels", "meta"]
        assert "use multiselect" in str(excinfo.value)
        assert not hasattr(Labels, "ask_tags")

    def test_requires_dataclass(self):
        class Plain:
            name: str = ""

        with pytest.raises(ConfigurationError, match="dataclass or a pydantic model"):
            asker(Plain)

    def test_frozen_dataclass(self):
        with pytest.raises(ConfigurationError, match="frozen"):

            @asker
            @dataclass(frozen=True)
            class Point:
                x: int = 0

    def test_existing_method_clash(self):
        @dataclass
        class Named:
            name: str = ""

            def ask_name(self):
                return "mine"

        with pytest.raises(GenerationError, match="already defined"):
            asker(Named)

        asker(Named, config=AskerConfig(overwrite_methods=True))
        assert generated_method(Named, "name").params == ("prompt",)

    def test_regenerating_a_decorated_record(self):
        methods = generate_methods(Deploy, AskerConfig(theme="none"))
        assert [m.field for m in methods] == [m.field for m in Deploy.__asker_methods__]
        assert all("PLAIN_STYLE" in m.source for m in methods)

    def test_generated_source_requires_generation(self):
        @dataclass
        class Bare:
            name: str = ""

        with pytest.raises(ConfigurationError):
            generated_source(Bare)
