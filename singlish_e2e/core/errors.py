from typing import Sequence


class HarnessError(Exception):
    """Base class for failures of the harness itself, as opposed to assertion failures."""


class ElementNotFound(HarnessError):
    def __init__(self, role: str, tried: Sequence[str] = ()):
        self.role = role
        self.tried = list(tried)
        message = f"{role} field not found"
        if self.tried:
            message += f" (tried: {', '.join(self.tried)})"
        super().__init__(message)


class ControlNotFound(HarnessError):
    def __init__(self, control: str = 'Delete/Clear button'):
        self.control = control
        super().__init__(f"{control} not found on page")


class ReadFailure(HarnessError):
    pass
