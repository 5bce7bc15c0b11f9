"""Unit tests for canvascmd.executor — mutation, dry-run proposals and
failure outcomes.
"""
from __future__ import annotations

import pytest

from canvascmd.action.nodes import Action, FailureKind, Intent, Layer, Target
from canvascmd.classifier import classify
from canvascmd.document import LayerDocument
from canvascmd.executor import (
    NO_TARGET_MESSAGE,
    NOT_RECOGNIZED_MESSAGE,
    ActionExecutor,
    execute,
)


class TestUnresolvedTarget:
    def test_no_selection(self, layers: list[Layer], mutate) -> None:
        outcome = execute(Action(Intent.UPDATE_STYLE, Target.SELECTED), layers[:1], None, mutate)
        assert outcome.success is False
        assert outcome.message == NO_TARGET_MESSAGE == "no target layer found"
        assert outcome.failure is FailureKind.UNRESOLVED_TARGET
        assert mutate.calls == []

    def test_no_matching_kind(self, mutate) -> None:
        outcome = execute(Action(Intent.DELETE, Target.IMAGE), [Layer("t", "text")], None, mutate)
        assert outcome.failure is FailureKind.UNRESOLVED_TARGET

    def test_checked_before_intent(self, mutate) -> None:
        outcome = execute(Action(Intent.UNKNOWN, Target.ALL), [], None, mutate)
        assert outcome.message == NO_TARGET_MESSAGE


class TestUpdateStyle:
    def test_colour_on_text_layers(self, layers: list[Layer], mutate) -> None:
        outcome = execute(classify("把文字改成紅色"), layers, None, mutate)
        assert outcome.success is True
        assert "2" in outcome.message
        assert outcome.affected == ("title", "caption")
        assert mutate.calls == [
            ("title", {"fill": "#FF0000"}),
            ("caption", {"fill": "#FF0000"}),
        ]

    def test_colour_and_font_size(self, layers: list[Layer], mutate) -> None:
        action = Action(Intent.UPDATE_STYLE, Target.SELECTED, params={"color": "#0000FF", "fontSize": 20})
        execute(action, layers, "title", mutate)
        assert mutate.calls == [("title", {"fill": "#0000FF", "fontSize": 20})]

    def test_without_params_still_calls_once(self, layers: list[Layer], mutate) -> None:
        execute(Action(Intent.UPDATE_STYLE, Target.IMAGE), layers, None, mutate)
        assert mutate.calls == [("photo", {})]


class TestResize:
    def test_scales_geometry(self, layers: list[Layer], mutate) -> None:
        outcome = execute(
            Action(Intent.RESIZE, Target.IMAGE, params={"scale": 1.5}), layers, None, mutate
        )
        assert outcome.success is True
        assert "1" in outcome.message
        assert mutate.calls == [("photo", {"width": 600.0, "height": 450.0})]

    def test_missing_geometry_defaults_to_100(self, mutate) -> None:
        layer = Layer("bare", "image")
        execute(Action(Intent.RESIZE, Target.ALL, params={"scale": 2}), [layer], None, mutate)
        assert mutate.calls == [("bare", {"width": 200, "height": 200})]

    def test_missing_geometry_through_document(self) -> None:
        document = LayerDocument([{"id": "bare", "type": "image"}])
        action = Action(Intent.RESIZE, Target.ALL, params={"scale": 2})
        execute(action, document.layers, None, document.mutate)
        bare = document.get("bare")
        assert bare.attrs["width"] == 200
        assert bare.attrs["height"] == 200

    def test_missing_scale_defaults_to_1(self, layers: list[Layer], mutate) -> None:
        execute(Action(Intent.RESIZE, Target.IMAGE), layers, None, mutate)
        assert mutate.calls == [("photo", {"width": 400, "height": 300})]

    def test_custom_default_dimension(self, mutate) -> None:
        executor = ActionExecutor(default_dimension=10)
        executor.execute(
            Action(Intent.RESIZE, Target.ALL, params={"scale": 3}), [Layer("b", "image")], None, mutate
        )
        assert mutate.calls == [("b", {"width": 30, "height": 30})]

    def test_string_geometry_treated_as_absent(self, mutate) -> None:
        layer = Layer("p", "image", {"width": "300", "height": 200})
        execute(Action(Intent.RESIZE, Target.ALL, params={"scale": 2}), [layer], None, mutate)
        assert mutate.calls == [("p", {"width": 200, "height": 400})]

    def test_boolean_geometry_treated_as_absent(self, mutate) -> None:
        layer = Layer("p", "image", {"width": True, "height": False})
        execute(Action(Intent.RESIZE, Target.ALL, params={"scale": 2}), [layer], None, mutate)
        assert mutate.calls == [("p", {"width": 200, "height": 200})]

    def test_non_numeric_scale_treated_as_absent(self, layers: list[Layer], mutate) -> None:
        action = Action(Intent.RESIZE, Target.IMAGE, params={"scale": "2"})
        outcome = execute(action, layers, None, mutate)
        assert outcome.success is True
        assert mutate.calls == [("photo", {"width": 400, "height": 300})]

    def test_quoted_yaml_geometry(self, tmp_path) -> None:
        path = tmp_path / "canvas.yaml"
        path.write_text('layers:\n  - {id: photo, type: image, width: "300", height: 200}\n', encoding="utf-8")
        document = LayerDocument.load(path)
        action = Action(Intent.RESIZE, Target.ALL, params={"scale": 2})
        execute(action, document.layers, None, document.mutate)
        assert document.get("photo").attrs["width"] == 200
        assert document.get("photo").attrs["height"] == 400


class TestTwoPhase:
    @pytest.mark.parametrize("intent", [Intent.DELETE, Intent.DUPLICATE])
    def test_never_mutates(self, layers: list[Layer], mutate, intent: Intent) -> None:
        outcome = execute(Action(intent, Target.ALL), layers[:2], None, mutate)
        assert outcome.success is True
        assert "2" in outcome.message
        assert "confirm" in outcome.message
        assert outcome.requires_confirmation is True
        assert outcome.affected == ("title", "photo")
        assert mutate.calls == []

    def test_message_names_operation(self, layers: list[Layer], mutate) -> None:
        outcome = execute(Action(Intent.DUPLICATE, Target.IMAGE), layers, None, mutate)
        assert outcome.message.startswith("duplicate 1")


class TestUnrecognized:
    @pytest.mark.parametrize(
        "intent", [Intent.UNKNOWN, Intent.MOVE, Intent.GENERATE, Intent.INPAINT]
    )
    def test_not_executable(self, layers: list[Layer], mutate, intent: Intent) -> None:
        outcome = execute(Action(intent, Target.ALL), layers, None, mutate)
        assert outcome.success is False
        assert outcome.message == NOT_RECOGNIZED_MESSAGE == "command not recognized"
        assert outcome.failure is FailureKind.UNRECOGNIZED_COMMAND
        assert outcome.suggestion is not None
        assert "把文字改成紅色" in outcome.suggestion
        assert mutate.calls == []


class TestAddressedLayer:
    def test_for_layer(self, layers: list[Layer], mutate) -> None:
        action = classify("改成紅色").for_layer("caption")
        outcome = execute(action, layers, "title", mutate)
        assert outcome.affected == ("caption",)
        assert mutate.calls == [("caption", {"fill": "#FF0000"})]


class TestMutateErrors:
    def test_callback_errors_propagate(self, layers: list[Layer]) -> None:
        calls: list[str] = []

        def failing(layer_id: str, updates: dict) -> None:
            calls.append(layer_id)
            if layer_id == "caption":
                raise RuntimeError("store unavailable")

        with pytest.raises(RuntimeError, match="store unavailable"):
            execute(Action(Intent.UPDATE_STYLE, Target.TEXT, params={"color": "#FF0000"}), layers, None, failing)
        assert calls == ["title", "caption"]
