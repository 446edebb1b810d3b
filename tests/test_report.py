"""Unit tests for localebuild.report module."""

from dataclasses import asdict

from localebuild.report import (
    BuildReport,
    ConfigurationError,
    Failure,
    LocaleBuildError,
    TranslationParseError,
)


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(ConfigurationError, LocaleBuildError)
        assert issubclass(TranslationParseError, LocaleBuildError)

    def test_parse_error_fields(self):
        exc = TranslationParseError("about", "es", "/l10n/es.json", "bad token")
        assert exc.view == "about"
        assert exc.language == "es"
        assert exc.path == "/l10n/es.json"
        assert "about" in str(exc) and "es" in str(exc)


class TestBuildReport:
    def test_failure_fields(self):
        failure = Failure("parse", "about", "es", "x")
        assert asdict(failure) == {"kind": "parse", "view": "about", "language": "es", "message": "x"}

    def test_initial_state(self):
        r = BuildReport()
        assert r.ok
        assert r.failures == []
        assert r.written == []

    def test_record_parse_error(self):
        r = BuildReport()
        failure = r.record_parse_error(TranslationParseError("about", "es", "p", "bad"))
        assert failure.kind == "parse"
        assert failure.language == "es"
        assert not r.ok

    def test_record_write_error(self):
        r = BuildReport()
        failure = r.record_write_error("about", PermissionError("denied"))
        assert failure.kind == "write"
        assert failure.language is None
        assert "denied" in failure.message

    def test_failures_by_kind(self):
        r = BuildReport()
        r.record(Failure("parse", "about", "es", "x"))
        r.record(Failure("parse", "splash", "fr", "x"))
        r.record(Failure("write", "about", None, "x"))
        assert r.failures_by_kind() == {"parse": 2, "write": 1}

    def test_failed_views_unique_in_order(self):
        r = BuildReport()
        r.record(Failure("parse", "splash", "es", "x"))
        r.record(Failure("parse", "about", "es", "x"))
        r.record(Failure("write", "splash", None, "x"))
        assert r.failed_views() == ["splash", "about"]

    def test_failures_returns_copy(self):
        r = BuildReport()
        r.record(Failure("parse", "about", "es", "x"))
        r.failures.clear()
        assert len(r.failures) == 1

    def test_mark_written(self):
        r = BuildReport()
        r.mark_written("about")
        assert r.written == ["about"]
        assert r.ok

    def test_reset(self):
        r = BuildReport()
        r.mark_written("about")
        r.record(Failure("write", "about", None, "x"))
        r.reset()
        assert r.ok
        assert r.written == []
