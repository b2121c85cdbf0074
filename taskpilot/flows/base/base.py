"""Base flow implementation.

A flow binds an input model, a prompt resource and an output model into a
single operation:

1. Validate the input, failing before any external call
2. Render the instruction from the prompt template
3. Make exactly one structured-generation call through the context's provider
4. Validate the payload against the output model

Flows hold no per-call state; the provider and model come from the
FlowContext passed into each call.
"""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError, to_json

from taskpilot.core.context.context import FlowContext
from taskpilot.core.errors.errors import (
    EmptyResponseError,
    ErrorContext,
    InputValidationError,
    SchemaMismatchError,
    validation_details,
)
from taskpilot.core.errors.models import ValidationErrorDetail
from taskpilot.flows.models.results import FlowErrorKind, FlowResult
from taskpilot.resources.models.base import PromptResource
from taskpilot.resources.registry.registry import resource_registry
from taskpilot.utils.pydantic.schema import model_to_response_schema

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


def _caller(context: FlowContext) -> str:
    return f" for user '{context.user_id}'" if context.user_id else ""


class Flow(Generic[InputT, OutputT]):
    """Base class for schema-bound flows.

    Subclasses set ``input_model``, ``output_model`` and ``prompt_name`` and
    implement ``prompt_variables``. The @flow decorator sets ``name`` and
    ``description`` and registers one instance in the flow registry.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    input_model: ClassVar[type[BaseModel]]
    output_model: ClassVar[type[BaseModel]]
    prompt_name: ClassVar[str]

    def __init__(self) -> None:
        self._response_schema = model_to_response_schema(self.output_model)

    @property
    def response_schema(self) -> dict[str, Any]:
        """JSON schema the external model's answer must follow."""
        return self._response_schema

    def get_prompt(self) -> PromptResource:
        return resource_registry.get(self.prompt_name, expected_type=PromptResource)  # type: ignore[return-value]

    def prompt_variables(self, input_data: InputT) -> dict[str, Any]:
        """Map a validated input onto the prompt template's variables."""
        raise NotImplementedError("Subclasses must implement prompt_variables()")

    def validate_input(self, input_data: Any) -> InputT:
        """Validate an input model instance or a camelCase mapping.

        Raises:
            InputValidationError: If the input does not satisfy the input model
        """
        if isinstance(input_data, self.input_model):
            return input_data  # type: ignore[return-value]

        if not isinstance(input_data, Mapping):
            raise self._input_error(
                f"Input must be a {self.input_model.__name__} or a mapping, got {type(input_data).__name__}",
                [
                    ValidationErrorDetail(
                        location="input",
                        message=f"Expected {self.input_model.__name__}, got {type(input_data).__name__}",
                        error_type="type_error",
                    )
                ],
            )

        # Strict models accept nested objects only from JSON, so mappings are validated in JSON form
        try:
            return self.input_model.model_validate_json(to_json(dict(input_data)))  # type: ignore[return-value]
        except PydanticSerializationError as e:
            raise self._input_error(
                f"Input for {self.input_model.__name__} is not JSON-compatible: {e}",
                [ValidationErrorDetail(location="input", message=str(e), error_type="serialization_error")],
                cause=e,
            ) from e
        except PydanticValidationError as e:
            raise self._input_error(
                f"Invalid input for {self.input_model.__name__}", validation_details(e), cause=e
            ) from e

    def render_instruction(self, input_data: InputT) -> str:
        """Render the instruction text for a validated input."""
        return self.get_prompt().render(self.prompt_variables(input_data))

    def validate_output(self, payload: Any) -> OutputT:
        """Validate the provider's payload against the output model.

        Raises:
            EmptyResponseError: If the payload is None or blank text
            SchemaMismatchError: If the payload does not satisfy the output model
        """
        if payload is None or (isinstance(payload, str) and not payload.strip()):
            raise EmptyResponseError(
                message=f"Flow '{self.name}' received an empty response from the model",
                context=self._error_context("EmptyResponseError", "validate_output", "output_validation"),
            )
        try:
            return self.output_model.model_validate(payload)  # type: ignore[return-value]
        except PydanticValidationError as e:
            raise SchemaMismatchError(
                message=f"Malformed AI response: payload does not match {self.output_model.__name__}",
                validation_errors=validation_details(e),
                context=self._error_context("SchemaMismatchError", "validate_output", "output_validation"),
                cause=e,
            ) from e

    async def run(self, input_data: InputT | Mapping[str, Any], context: FlowContext) -> OutputT:
        """Execute the flow and return its validated output.

        Provider exceptions propagate unchanged.

        Raises:
            InputValidationError: Before any external call, if the input is invalid
            EmptyResponseError: If the model returned no payload
            SchemaMismatchError: If the payload does not match the output model
        """
        validated = self.validate_input(input_data)
        instruction = self.render_instruction(validated)

        logger.info(f"Running flow '{self.name}' with model '{context.model_name}'{_caller(context)}")
        payload = await context.llm.generate_structured(
            instruction=instruction,
            response_schema=self.response_schema,
            model_name=context.model_name,
        )

        try:
            output = self.validate_output(payload)
        except (EmptyResponseError, SchemaMismatchError) as e:
            logger.warning(f"Flow '{self.name}' rejected model response: {e}")
            raise
        logger.debug(f"Flow '{self.name}' completed")
        return output

    async def execute(self, input_data: InputT | Mapping[str, Any], context: FlowContext) -> FlowResult[OutputT]:
        """Execute the flow and return a tagged result instead of raising."""
        try:
            validated = self.validate_input(input_data)
        except InputValidationError as e:
            return FlowResult.err(self.name, FlowErrorKind.INVALID_INPUT, str(e), e)

        instruction = self.render_instruction(validated)

        logger.info(f"Executing flow '{self.name}' with model '{context.model_name}'{_caller(context)}")
        try:
            payload = await context.llm.generate_structured(
                instruction=instruction,
                response_schema=self.response_schema,
                model_name=context.model_name,
            )
        except Exception as e:
            logger.error(f"Flow '{self.name}' external call failed{_caller(context)}: {e}")
            return FlowResult.err(self.name, FlowErrorKind.PROVIDER_FAILURE, str(e), e)

        try:
            output = self.validate_output(payload)
        except EmptyResponseError as e:
            logger.warning(f"Flow '{self.name}' received an empty response")
            return FlowResult.err(self.name, FlowErrorKind.EMPTY_RESPONSE, str(e), e)
        except SchemaMismatchError as e:
            logger.warning(f"Flow '{self.name}' received a malformed response: {e}")
            return FlowResult.err(self.name, FlowErrorKind.SCHEMA_MISMATCH, str(e), e)

        return FlowResult.ok(self.name, output)

    def _error_context(self, error_type: str, location: str, operation: str) -> ErrorContext:
        return ErrorContext.create(
            flow_name=self.name,
            error_type=error_type,
            error_location=location,
            component=type(self).__name__,
            operation=operation,
        )

    def _input_error(
        self, message: str, details: list[ValidationErrorDetail], cause: Exception | None = None
    ) -> InputValidationError:
        return InputValidationError(
            message=message,
            validation_errors=details,
            context=self._error_context("InputValidationError", "validate_input", "input_validation"),
            cause=cause,
        )

    def __str__(self) -> str:
        return f"Flow(name='{self.name}')"
