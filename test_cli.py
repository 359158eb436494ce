"""
Test suite for the command-line entry point.
Runs without an API key so every result comes from the fallback path.
"""
import io
import json
import logging
import os
import subprocess
import sys
import tempfile
from unittest.mock import patch

from wanderpost import ai_helpers, cli


def run_cli(argv):
    """Run cli.main() with logging setup stubbed out; returns (exit code, stdout)."""
    stdout = io.StringIO()
    with patch.dict(os.environ, {"API_KEY": ""}), \
            patch.object(ai_helpers, "_default_context", None), \
            patch.object(cli, "setup_logging", return_value=logging.getLogger("wanderpost")), \
            patch.object(cli, "log_startup_config"), \
            patch("sys.stdout", stdout):
        code = cli.main(argv)
    return code, stdout.getvalue()


def test_cli_json_output_without_key():
    code, output = run_cli(["Paris", "--json"])

    assert code == 0
    result = json.loads(output)
    assert result == {
        "idea": "API Key not configured. Please set up your API_KEY.",
        "image": "https://picsum.photos/seed/Paris/1200/675",
    }, f"Unexpected output: {result}"
    print("✓ CLI JSON test passed")


def test_cli_json_stdout_is_parseable_with_real_logging():
    """Log lines go to stderr, so --json stdout parses as-is."""
    with tempfile.TemporaryDirectory() as log_dir:
        env = dict(os.environ, API_KEY="", LOG_DIR=log_dir)
        proc = subprocess.run(
            [sys.executable, "-m", "wanderpost", "Paris", "--json"],
            cwd=os.path.dirname(os.path.abspath(__file__)),
            env=env,
            capture_output=True,
            text=True,
            timeout=120,
        )

    assert proc.returncode == 0, f"CLI failed: {proc.stderr}"
    result = json.loads(proc.stdout)
    assert result == {
        "idea": "API Key not configured. Please set up your API_KEY.",
        "image": "https://picsum.photos/seed/Paris/1200/675",
    }, f"Unexpected output: {result}"
    assert "API_KEY is not available" in proc.stderr, "Missing key warning should be logged to stderr"
    print("✓ CLI JSON with real logging test passed")


def test_cli_custom_image_prompt():
    code, output = run_cli(["Lisbon", "--image-prompt", "Lisbon tram at dusk", "--json"])

    assert code == 0
    assert json.loads(output)["image"] == "https://picsum.photos/seed/Lisbontramatdusk/1200/675"
    print("✓ CLI image prompt test passed")


def test_cli_skip_image_text_output():
    code, output = run_cli(["Kyoto", "--skip-image"])

    assert code == 0
    assert "API Key not configured" in output
    assert "Image" not in output
    print("✓ CLI skip image test passed")


def test_format_image_abbreviates_data_uri():
    data_uri = "data:image/jpeg;base64," + "A" * 500
    short = cli.format_image(data_uri)

    assert short.startswith("data:image/jpeg;base64,")
    assert short.endswith(f"({len(data_uri)} chars)")
    assert cli.format_image("https://picsum.photos/seed/Rome/1200/675") == "https://picsum.photos/seed/Rome/1200/675"
    print("✓ Image formatting test passed")


def test_cli_reports_fatal_error():
    with patch.object(cli, "run", side_effect=RuntimeError("event loop exploded")):
        code, _ = run_cli(["Paris"])

    assert code == 1
    print("✓ CLI fatal error test passed")


def run_all_tests():
    """Run all tests and report results."""
    print("Running CLI Tests\n" + "=" * 50 + "\n")

    tests = [obj for name, obj in sorted(globals().items())
             if name.startswith("test_") and callable(obj)]
    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"✗ {test.__name__} FAILED: {e}", file=sys.stderr)
            failed += 1

    print("\n" + "=" * 50)
    print(f"Results: {len(tests) - failed} passed, {failed} failed")
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    run_all_tests()
