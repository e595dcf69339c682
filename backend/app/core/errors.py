"""Domain errors raised below the route layer."""


class RecruitFlowError(Exception):
    """Base class for errors the API translates into HTTP responses."""


class DuplicateUsernameError(RecruitFlowError):
    def __init__(self, username: str):
        super().__init__(f"Username '{username}' is already taken")
        self.username = username


class InvalidTransitionError(RecruitFlowError):
    def __init__(self, current: str, target: str):
        super().__init__(f"Cannot move candidate from '{current}' to '{target}'")
        self.current = current
        self.target = target
