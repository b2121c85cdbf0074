"""Tests for the Flow executor."""

import logging
from typing import ClassVar

import pytest
from pydantic import Field

from taskpilot.core.errors import (
    EmptyResponseError,
    InputValidationError,
    MalformedResponseError,
    ProviderError,
    SchemaMismatchError,
)
from taskpilot.core.errors.errors import ErrorContext
from taskpilot.core.errors.models import ProviderErrorContext
from taskpilot.core.models import ResponseModel, StrictBaseModel
from taskpilot.flows import Flow, FlowErrorKind, FlowStatus
from taskpilot.resources.decorators.decorators import prompt
from taskpilot.resources.models.base import ResourceBase


@prompt("flows-test-echo-prompt")
class EchoPrompt(ResourceBase):
    template: ClassVar[str] = "Echo the text: {{text}} ({{count}} times)"


class EchoInput(StrictBaseModel):
    text: str = Field(..., description="Text to echo")
    repeat_count: int = Field(default=1, ge=1, description="How often to echo")


class EchoOutput(ResponseModel):
    echoed_text: str = Field(..., description="The echoed text")


class EchoFlow(Flow[EchoInput, EchoOutput]):
    name = "echoFlow"
    input_model = EchoInput
    output_model = EchoOutput
    prompt_name = "flows-test-echo-prompt"

    def prompt_variables(self, input_data: EchoInput) -> dict:
        return {"text": input_data.text, "count": input_data.repeat_count}


def _provider_error():
    return ProviderError(
        "service unavailable",
        ErrorContext.create(
            flow_name="test",
            error_type="ProviderError",
            error_location="test",
            component="fake",
            operation="generate",
        ),
        ProviderErrorContext(provider_name="fake-llm", provider_type="llm", operation="generate"),
    )


@pytest.fixture
def echo_flow():
    return EchoFlow()


class TestFlowRun:
    @pytest.mark.asyncio
    async def test_run_with_model_input(self, echo_flow, fake_llm, context_for):
        fake = fake_llm({"echoedText": "hello"})
        result = await echo_flow.run(EchoInput(text="hello", repeat_count=2), context_for(fake))

        assert isinstance(result, EchoOutput)
        assert result.echoed_text == "hello"
        assert len(fake.calls) == 1
        call = fake.calls[0]
        assert call["instruction"] == "Echo the text: hello (2 times)"
        assert call["model_name"] == "test-model"
        assert call["response_schema"] == echo_flow.response_schema
        assert "echoedText" in call["response_schema"]["properties"]

    @pytest.mark.asyncio
    async def test_run_with_camel_case_mapping(self, echo_flow, fake_llm, context_for):
        fake = fake_llm({"echoedText": "hi"})
        await echo_flow.run({"text": "hi", "repeatCount": 3}, context_for(fake))
        assert fake.calls[0]["instruction"] == "Echo the text: hi (3 times)"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "bad_input",
        [
            {},
            {"text": 42},
            {"text": "hi", "repeatCount": "3"},
            {"text": "hi", "unexpected": True},
            {"text": "hi", "repeatCount": 0},
            "just a string",
            None,
        ],
    )
    async def test_invalid_input_fails_before_call(self, echo_flow, fake_llm, context_for, bad_input):
        fake = fake_llm({"echoedText": "never"})
        with pytest.raises(InputValidationError) as exc_info:
            await echo_flow.run(bad_input, context_for(fake))
        assert exc_info.value.validation_errors
        assert fake.calls == []

    @pytest.mark.asyncio
    async def test_provider_error_propagates_unchanged(self, echo_flow, fake_llm, context_for):
        error = _provider_error()
        fake = fake_llm(error=error)
        with pytest.raises(ProviderError) as exc_info:
            await echo_flow.run({"text": "hi"}, context_for(fake))
        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_arbitrary_provider_exception_propagates(self, echo_flow, fake_llm, context_for):
        fake = fake_llm(error=ConnectionError("socket closed"))
        with pytest.raises(ConnectionError, match="socket closed"):
            await echo_flow.run({"text": "hi"}, context_for(fake))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [None, "", "   "])
    async def test_empty_response(self, echo_flow, fake_llm, context_for, payload):
        fake = fake_llm(payload)
        with pytest.raises(EmptyResponseError):
            await echo_flow.run({"text": "hi"}, context_for(fake))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"echoed": "hi"}, {"echoedText": ["a"]}, "not json", []])
    async def test_schema_mismatch(self, echo_flow, fake_llm, context_for, payload):
        fake = fake_llm(payload)
        with pytest.raises(SchemaMismatchError) as exc_info:
            await echo_flow.run({"text": "hi"}, context_for(fake))
        assert isinstance(exc_info.value, MalformedResponseError)
        assert exc_info.value.validation_errors

    @pytest.mark.asyncio
    async def test_unknown_output_keys_are_ignored(self, echo_flow, fake_llm, context_for):
        fake = fake_llm({"echoedText": "hi", "confidence": 0.9})
        result = await echo_flow.run({"text": "hi"}, context_for(fake))
        assert result.echoed_text == "hi"

    @pytest.mark.asyncio
    async def test_run_logs_caller_identity(self, echo_flow, fake_llm, context_for, caplog):
        caplog.set_level(logging.INFO, logger="taskpilot.flows.base.base")
        fake = fake_llm({"echoedText": "hi"})

        await echo_flow.run({"text": "hi"}, context_for(fake, user_id="user-7"))
        await echo_flow.run({"text": "hi"}, context_for(fake))

        messages = [record.getMessage() for record in caplog.records if "Running flow" in record.getMessage()]
        assert len(messages) == 2
        assert messages[0].endswith("for user 'user-7'")
        assert "for user" not in messages[1]


class TestFlowExecute:
    @pytest.mark.asyncio
    async def test_ok(self, echo_flow, fake_llm, context_for):
        result = await echo_flow.execute({"text": "hi"}, context_for(fake_llm({"echoedText": "hi"})))
        assert result.is_ok
        assert result.status == FlowStatus.SUCCESS
        assert result.flow_name == "echoFlow"
        assert result.unwrap().echoed_text == "hi"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "input_data,fake_kwargs,kind,error_type",
        [
            ({"text": 1}, {"payload": {"echoedText": "x"}}, FlowErrorKind.INVALID_INPUT, InputValidationError),
            ({"text": "hi"}, {"error": ConnectionError("down")}, FlowErrorKind.PROVIDER_FAILURE, ConnectionError),
            ({"text": "hi"}, {"payload": None}, FlowErrorKind.EMPTY_RESPONSE, EmptyResponseError),
            ({"text": "hi"}, {"payload": {}}, FlowErrorKind.SCHEMA_MISMATCH, SchemaMismatchError),
        ],
    )
    async def test_err_kinds(self, echo_flow, fake_llm, context_for, input_data, fake_kwargs, kind, error_type):
        result = await echo_flow.execute(input_data, context_for(fake_llm(**fake_kwargs)))
        assert result.is_err
        assert result.error_kind == kind
        assert result.error
        assert result.data is None
        with pytest.raises(error_type):
            result.unwrap()

    @pytest.mark.asyncio
    async def test_provider_failure_keeps_original_exception(self, echo_flow, fake_llm, context_for):
        error = _provider_error()
        result = await echo_flow.execute({"text": "hi"}, context_for(fake_llm(error=error)))
        assert result.error_kind == FlowErrorKind.PROVIDER_FAILURE
        assert result.exception is error


class TestRenderInstruction:
    def test_unknown_prompt(self, echo_flow):
        class MissingPromptFlow(EchoFlow):
            prompt_name = "flows-test-missing-prompt"

        with pytest.raises(KeyError):
            MissingPromptFlow().render_instruction(EchoInput(text="x"))

    def test_template_variable_drift_is_caught(self):
        class DriftingFlow(EchoFlow):
            def prompt_variables(self, input_data):
                return {"text": input_data.text}

        with pytest.raises(ValueError, match="unreplaced"):
            DriftingFlow().render_instruction(EchoInput(text="x"))
