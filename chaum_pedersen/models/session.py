from enum import Enum


class SessionState(Enum):
    UNINITIATED = "uninitiated"
    COMMITTED = "committed"
    CHALLENGED = "challenged"
    RESPONDED = "responded"
    VERIFIED = "verified"
