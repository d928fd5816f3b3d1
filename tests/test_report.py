from pathlib import Path

from lock_guard.models import CheckResult
from lock_guard.report import aggregate
from lock_guard.summary import render_report


def _results() -> list[CheckResult]:
    return [
        CheckResult.from_iterable(Path("packages/core/package-lock.json"), ["@org/a", "@org/b"]),
        CheckResult.from_iterable(Path("packages/rest/package-lock.json"), []),
        CheckResult.from_iterable(Path("extensions/x/package-lock.json"), ["@org/c"]),
    ]


def test_aggregate_keeps_only_bad_packages() -> None:
    report = aggregate(_results())

    assert report["hasViolations"] is True
    assert [p["lockFile"] for p in report["packages"]] == [
        "packages/core/package-lock.json",
        "extensions/x/package-lock.json",
    ]


def test_aggregate_clean() -> None:
    report = aggregate([CheckResult.from_iterable(Path("a/package-lock.json"), [])])

    assert report["hasViolations"] is False
    assert report["packages"] == []
    assert render_report(report) == ""


def test_render_report_layout() -> None:
    text = render_report(aggregate(_results()))

    assert text == (
        "\n"
        "Invalid package-lock entries found!\n"
        "\n"
        "  packages/core/package-lock.json\n"
        "    -> @org/a\n"
        "    -> @org/b\n"
        "  extensions/x/package-lock.json\n"
        "    -> @org/c\n"
        "\n"
        "Run the following command to fix the problems:\n"
        "\n"
        "  $ npm run update-package-locks\n"
        "\n"
    )


def test_render_report_custom_fix_command() -> None:
    text = render_report(aggregate(_results()), fix_command="make locks")

    assert "  $ make locks\n" in text
