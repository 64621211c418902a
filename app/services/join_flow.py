"""
Recruit Portal - Join / Payment Hand-off Flow

Client-side wizard kept in the Flask session:

    IDLE -> JOIN_PROMPT(company) -> WORK_PERMIT_FORM -> REDIRECTING

Nothing here touches the backend. Reaching REDIRECTING requires both the
"Apply Now" and the "Complete" steps, in that order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlencode

SESSION_KEY = 'join_flow'


class JoinState(str, Enum):
    IDLE = 'idle'
    JOIN_PROMPT = 'join_prompt'
    WORK_PERMIT_FORM = 'work_permit_form'
    REDIRECTING = 'redirecting'


class FlowError(Exception):
    """Transition not allowed from the current state."""

    def __init__(self, action, state):
        super().__init__(f'Cannot {action} while {state.value}')
        self.action = action
        self.state = state


@dataclass
class JoinFlow:
    state: JoinState = JoinState.IDLE
    company: Optional[str] = None

    def choose(self, company_name):
        """'Join' on a company card."""
        self.state = JoinState.JOIN_PROMPT
        self.company = company_name

    def apply(self):
        """'Apply Now' on the join prompt."""
        self._require(JoinState.JOIN_PROMPT, 'apply')
        self.state = JoinState.WORK_PERMIT_FORM

    def complete(self):
        """'Complete' on the work permit form."""
        self._require(JoinState.WORK_PERMIT_FORM, 'complete')
        self.state = JoinState.REDIRECTING

    def cancel(self):
        self.state = JoinState.IDLE
        self.company = None

    def _require(self, expected, action):
        if self.state is not expected:
            raise FlowError(action, self.state)

    # Session (de)serialization

    def to_dict(self):
        return {'state': self.state.value, 'company': self.company}

    @classmethod
    def from_dict(cls, data):
        if not data:
            return cls()
        try:
            state = JoinState(data.get('state'))
        except ValueError:
            return cls()
        return cls(state=state, company=data.get('company'))

    @classmethod
    def load(cls, session):
        return cls.from_dict(session.get(SESSION_KEY))

    def save(self, session):
        session[SESSION_KEY] = self.to_dict()

    @staticmethod
    def clear(session):
        session.pop(SESSION_KEY, None)


def payment_url(config):
    """External payment page carrying the fixed order tracking id."""
    query = urlencode({'OrderTrackingId': config['ORDER_TRACKING_ID']})
    return f"{config['PAYMENT_URL']}?{query}"
