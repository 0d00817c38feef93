"""
Signup state machine definition.

Every state, its allowed successors, and whether it may end the request
early are fixed here; SignupUseCase refuses any other transition.
"""

from enum import Enum
from typing import Dict, FrozenSet


class SignupState(str, Enum):
    validating_input = "validating_input"
    checking_duplicate = "checking_duplicate"
    creating_identity = "creating_identity"
    provisioning_agent = "provisioning_agent"
    provisioning_org = "provisioning_org"
    provisioning_client = "provisioning_client"
    persisting = "persisting"
    responding = "responding"


TRANSITIONS: Dict[SignupState, FrozenSet[SignupState]] = {
    SignupState.validating_input: frozenset({SignupState.checking_duplicate}),
    SignupState.checking_duplicate: frozenset({SignupState.creating_identity}),
    SignupState.creating_identity: frozenset({SignupState.provisioning_agent}),
    SignupState.provisioning_agent: frozenset({SignupState.provisioning_org}),
    SignupState.provisioning_org: frozenset(
        {SignupState.provisioning_client, SignupState.persisting}
    ),
    SignupState.provisioning_client: frozenset({SignupState.persisting}),
    SignupState.persisting: frozenset({SignupState.responding}),
    SignupState.responding: frozenset(),
}

# States allowed to end the request with an error (400 / 409 / 500).
# Once the identity exists, every later state degrades instead.
TERMINATING_STATES: FrozenSet[SignupState] = frozenset(
    {
        SignupState.validating_input,
        SignupState.checking_duplicate,
        SignupState.creating_identity,
    }
)
