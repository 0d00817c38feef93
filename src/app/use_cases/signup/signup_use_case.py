import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Optional, Union

from libs.result import Error, Result, Return
from src.app.services.identity_store import (
    DUPLICATE_IDENTITY,
    IDENTITY_ERROR_CODES,
    IDENTITY_STORE_UNAVAILABLE,
)
from src.domain.entities import (
    BusinessType,
    ClonedAgent,
    Client,
    Identity,
    Organization,
    Plan,
    SignupRecord,
)
from .signup_dto import (
    SignupCommand,
    SignupDependencies,
    SignupResponse,
    SignupSettings,
    UserData,
)
from .signup_states import TERMINATING_STATES, TRANSITIONS, SignupState

logger = logging.getLogger(__name__)

StepOutcome = Union[SignupState, Error]

# Normalized codes for identity creation failures raised outside the store
_IDENTITY_STEP_FAILURES = {
    "STEP_TIMEOUT": "IDENTITY_TIMEOUT",
    "STEP_ERROR": IDENTITY_STORE_UNAVAILABLE,
}


@dataclass
class SignupContext:
    """Per-request state carried forward from step to step"""

    command: SignupCommand
    business_type: BusinessType
    widget_id: str
    identity: Optional[Identity] = None
    template_id: Optional[str] = None
    cloned_agent: Optional[ClonedAgent] = None
    organization: Optional[Organization] = None
    client: Optional[Client] = None


class SignupUseCase:
    """
    Signup Use Case - provisions a new account across all collaborators

    Command/Response Pattern:
    - Input: SignupCommand
    - Output: Result[SignupResponse]

    Flow (see signup_states.TRANSITIONS):
    1. Validate required fields (MISSING_FIELDS)
    2. Advisory duplicate check; a failing check does not block signup
    3. Create the identity (USER_ALREADY_EXISTS / AUTH_PROVIDER_ERROR)
    4. Clone the business-type agent template
    5. Create the organization with the cloned agent as its widget
    6. Create the org-admin client, only when the organization has an id
    7. Persist the signup record, whatever the provisioning outcome
    8. Respond with the public account fields

    Only steps 1-3 can fail the request. The identity is the one durable,
    customer-visible side effect, so after it exists every failure is
    logged, recorded as absent, and the flow continues.
    """

    def __init__(self, deps: SignupDependencies, settings: SignupSettings):
        self.deps = deps
        self.settings = settings
        self._handlers = {
            SignupState.validating_input: self._validate_input,
            SignupState.checking_duplicate: self._check_duplicate,
            SignupState.creating_identity: self._create_identity,
            SignupState.provisioning_agent: self._provision_agent,
            SignupState.provisioning_org: self._provision_org,
            SignupState.provisioning_client: self._provision_client,
            SignupState.persisting: self._persist,
        }

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with name, email, password, business type

        Returns:
            Result[SignupResponse] on success, or Error with code
            MISSING_FIELDS, USER_ALREADY_EXISTS or AUTH_PROVIDER_ERROR
        """
        context = SignupContext(
            command=command,
            business_type=BusinessType.resolve(command.business_type),
            widget_id=self.settings.default_widget_id,
        )

        state = SignupState.validating_input
        while state is not SignupState.responding:
            outcome = await self._handlers[state](context)

            if isinstance(outcome, Error):
                if state not in TERMINATING_STATES:
                    raise RuntimeError(f"Signup state {state.value} cannot end the request")
                logger.info(
                    f"Signup for {command.email} stopped in {state.value}: {outcome.code}"
                )
                return Return.err(outcome)

            if outcome not in TRANSITIONS[state]:
                raise RuntimeError(
                    f"Illegal signup transition {state.value} -> {outcome.value}"
                )
            state = outcome

        return Return.ok(self._respond(context))

    async def _guarded(self, state: SignupState, call: Awaitable[Result]) -> Result:
        """Run one collaborator call under the step timeout.

        Timeouts and unexpected exceptions become an Error result so that
        each step applies its own failure policy to them.
        """
        timeout = self.settings.step_timeout_seconds
        try:
            if timeout is None:
                return await call
            return await asyncio.wait_for(call, timeout=timeout)
        except asyncio.TimeoutError:
            logger.error(f"Signup step {state.value} timed out after {timeout}s")
            return Return.err(Error("STEP_TIMEOUT", f"{state.value} timed out", state.value))
        except Exception as exc:
            logger.exception(f"Signup step {state.value} raised unexpectedly")
            return Return.err(Error("STEP_ERROR", str(exc), state.value))

    async def _validate_input(self, context: SignupContext) -> StepOutcome:
        command = context.command
        for value in (command.name, command.email, command.password):
            if value is None or not value.strip():
                return Error("MISSING_FIELDS", "All fields are required")
        logger.info(f"Starting signup process for {command.email}")
        return SignupState.checking_duplicate

    async def _check_duplicate(self, context: SignupContext) -> StepOutcome:
        email = context.command.email
        result = await self._guarded(
            SignupState.checking_duplicate, self.deps.identity_store.exists(email)
        )
        if result.is_err():
            # Advisory only; identity creation enforces uniqueness
            logger.warning(
                f"Duplicate check for {email} failed ({result.error.code}), continuing"
            )
            return SignupState.creating_identity

        if result.value:
            logger.info(f"Email {email} already has an identity")
            return Error("USER_ALREADY_EXISTS", "User already exists")
        return SignupState.creating_identity

    async def _create_identity(self, context: SignupContext) -> StepOutcome:
        command = context.command
        result = await self._guarded(
            SignupState.creating_identity,
            self.deps.identity_store.create(command.email, command.password, command.name),
        )

        if result.is_err():
            error = result.error
            if error.code == DUPLICATE_IDENTITY:
                return Error("USER_ALREADY_EXISTS", "User already exists")
            logger.error(f"Identity creation for {command.email} failed: {error.code}")
            if error.code in _IDENTITY_STEP_FAILURES:
                reason = _IDENTITY_STEP_FAILURES[error.code]
            elif error.code in IDENTITY_ERROR_CODES:
                reason = error.code
            else:
                reason = IDENTITY_STORE_UNAVAILABLE
            return Error("AUTH_PROVIDER_ERROR", error.message, reason)

        created = result.value
        if created.already_exists:
            logger.info(f"User {command.email} already exists and authenticated successfully")
            return Error("USER_ALREADY_EXISTS", "User already exists")

        context.identity = created.identity
        logger.info(f"Identity created with ID: {created.identity.id}")
        return SignupState.provisioning_agent

    async def _provision_agent(self, context: SignupContext) -> StepOutcome:
        template_id = self.settings.template_id_for(context.business_type)
        context.template_id = template_id
        logger.info(
            f"Selected template ID for business type {context.business_type.value}: {template_id}"
        )

        exported = await self._guarded(
            SignupState.provisioning_agent,
            self.deps.agent_templates.export_template(template_id),
        )
        if exported.is_err():
            self._log_degraded(context, SignupState.provisioning_agent, exported.error)
            return SignupState.provisioning_org

        imported = await self._guarded(
            SignupState.provisioning_agent,
            self.deps.agent_templates.import_template(
                exported.value, context.business_type, template_id
            ),
        )
        if imported.is_err():
            self._log_degraded(context, SignupState.provisioning_agent, imported.error)
            return SignupState.provisioning_org

        context.cloned_agent = imported.value
        context.widget_id = imported.value.id
        logger.info(f"Using newly created widget ID: {context.widget_id}")
        return SignupState.provisioning_org

    async def _provision_org(self, context: SignupContext) -> StepOutcome:
        result = await self._guarded(
            SignupState.provisioning_org,
            self.deps.organizations.create_organization(
                context.command.name, context.widget_id
            ),
        )
        if result.is_err():
            self._log_degraded(context, SignupState.provisioning_org, result.error)
            return SignupState.persisting

        context.organization = result.value
        if not context.organization.id:
            logger.warning(
                f"Organization for {context.command.email} has no ID, skipping client creation"
            )
            return SignupState.persisting
        return SignupState.provisioning_client

    async def _provision_client(self, context: SignupContext) -> StepOutcome:
        command = context.command
        result = await self._guarded(
            SignupState.provisioning_client,
            self.deps.clients.create_client(
                context.organization.id, command.name, command.email, command.password
            ),
        )
        if result.is_err():
            self._log_degraded(context, SignupState.provisioning_client, result.error)
            return SignupState.persisting

        context.client = result.value
        return SignupState.persisting

    async def _persist(self, context: SignupContext) -> StepOutcome:
        record = self._build_record(context)
        result = await self._guarded(
            SignupState.persisting,
            self.deps.records.save(context.identity.id, record),
        )
        if result.is_err():
            # Identity exists without a record; reconciled out-of-band
            self._log_degraded(context, SignupState.persisting, result.error)
        return SignupState.responding

    def _build_record(self, context: SignupContext) -> SignupRecord:
        command = context.command
        return SignupRecord(
            identity_id=context.identity.id,
            name=command.name,
            email=command.email,
            business_type=context.business_type.value,
            plan=Plan.free,
            organization=context.organization.model_dump() if context.organization else None,
            client=context.client.snapshot() if context.client else None,
            cloned_agent=context.cloned_agent.model_dump() if context.cloned_agent else None,
        )

    def _respond(self, context: SignupContext) -> SignupResponse:
        command = context.command
        return SignupResponse(
            message="User created successfully",
            user_id=context.identity.id,
            user_data=UserData(
                name=command.name,
                email=command.email,
                business_type=context.business_type.value,
                plan=Plan.free.value,
            ),
        )

    def _log_degraded(self, context: SignupContext, state: SignupState, error: Error) -> None:
        identity_id = context.identity.id if context.identity else None
        detail = f" ({error.reason})" if error.reason else ""
        logger.error(
            f"Signup step {state.value} degraded for {context.command.email} "
            f"(identity {identity_id}): {error.code} {error.message}{detail}"
        )
