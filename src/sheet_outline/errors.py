# src/sheet_outline/errors.py


class OutlineError(Exception):
    """Base class for failures that abort an outline load."""


class MalformedInput(OutlineError, ValueError):
    """Raw text is empty or holds no parseable header row."""


class MissingRequiredColumn(OutlineError, KeyError):
    """Header row is present but the label column cannot be resolved."""

    def __init__(self, role: str, headers: list[str]) -> None:
        self.role = role
        self.headers = list(headers)
        super().__init__(f"Required column '{role}' not found in headers: {headers}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0])
