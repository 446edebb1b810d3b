"""Failure tracking for a locale build run."""

import threading
from dataclasses import dataclass


class LocaleBuildError(Exception):
    """A fatal error: the whole run is aborted."""


class ConfigurationError(LocaleBuildError):
    pass


class TranslationParseError(LocaleBuildError):
    def __init__(self, view: str, language: str, path: str, reason: str):
        self.view = view
        self.language = language
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse {language} translations for {view} ({path}): {reason}")


@dataclass
class Failure:
    kind: str  # "parse" | "write"
    view: str
    language: str | None
    message: str


class BuildReport:
    def __init__(self) -> None:
        self._failures: list[Failure] = []
        self._written: list[str] = []
        self._lock = threading.Lock()

    def record(self, failure: Failure) -> None:
        with self._lock:
            self._failures.append(failure)

    def record_parse_error(self, exc: TranslationParseError) -> Failure:
        failure = Failure(kind="parse", view=exc.view, language=exc.language, message=str(exc))
        self.record(failure)
        return failure

    def record_write_error(self, view: str, exc: OSError) -> Failure:
        failure = Failure(kind="write", view=view, language=None, message=str(exc))
        self.record(failure)
        return failure

    def mark_written(self, view: str) -> None:
        with self._lock:
            self._written.append(view)

    @property
    def ok(self) -> bool:
        return not self._failures

    def failures_by_kind(self) -> dict[str, int]:
        result: dict[str, int] = {}
        for f in self._failures:
            result[f.kind] = result.get(f.kind, 0) + 1
        return result

    def failed_views(self) -> list[str]:
        seen: list[str] = []
        for f in self._failures:
            if f.view not in seen:
                seen.append(f.view)
        return seen

    @property
    def failures(self) -> list[Failure]:
        return list(self._failures)

    @property
    def written(self) -> list[str]:
        return list(self._written)

    def reset(self) -> None:
        with self._lock:
            self._failures.clear()
            self._written.clear()
