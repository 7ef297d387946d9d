"""Engine exceptions that carry a note and the place they were raised."""

from __future__ import annotations

__all__ = ["EngineError", "SoundFileError"]


class EngineError(Exception):
    """Base error of the engine: a note plus the file and line it came from."""

    def __init__(self, note: str = "", file: str = "", line: int = 0) -> None:
        super().__init__(note)
        self.note = note
        self.file = file
        self.line = line

    def location(self) -> str:
        return f"Line [{self.line}] in {self.file}"

    def full_message(self) -> str:
        return f"Note: {self.note}\n\nLocation: {self.location()}"

    def exception_type(self) -> str:
        return "Engine Exception"

    def __str__(self) -> str:
        return self.full_message()


class SoundFileError(EngineError):
    """A sound file could not be read or has the wrong format."""

    def __init__(self, note: str, filename: str, file: str = "", line: int = 0) -> None:
        super().__init__(note, file, line)
        self.filename = filename

    def full_message(self) -> str:
        return (
            f"Filename: {self.filename}\n\n"
            f"Note: {self.note}\n\n"
            f"Location: {self.location()}"
        )

    def exception_type(self) -> str:
        return "Sound System File Exception"