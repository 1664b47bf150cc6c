import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import main


def run_cli(*argv: str):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        code = main.main(["--log-level", "ERROR", *argv])
    return code, buffer.getvalue()


class CliTests(unittest.TestCase):
    def test_pattern_prints_layout(self) -> None:
        code, output = run_cli("pattern", "--size", "daily", "--seed", "1")
        self.assertEqual(code, 0)
        lines = output.strip().splitlines()
        self.assertEqual(len(lines), 16)
        self.assertTrue(all(len(line) == 15 for line in lines[:15]))
        self.assertIn("valid", lines[-1])

    def test_pattern_with_difficulty(self) -> None:
        code, output = run_cli(
            "pattern", "--width", "9", "--height", "9", "--seed", "3", "--random", "--difficulty", "hard"
        )
        self.assertEqual(code, 0)
        lines = output.strip().splitlines()
        self.assertEqual(len(lines), 10)
        self.assertTrue(lines[-1].endswith("valid"))

    def test_generate_accepts_difficulty(self) -> None:
        code, output = run_cli(
            "generate", "--width", "3", "--height", "3", "--seed", "5", "--difficulty", "easy"
        )
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(output)["width"], 3)

    def test_unknown_difficulty_and_log_level_are_rejected(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.main(["pattern", "--difficulty", "brutal"])
            with self.assertRaises(SystemExit):
                main.main(["--log-level", "chatty", "pattern"])

    def test_generate_then_validate(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "grid.json"
            code, _ = run_cli(
                "generate", "--width", "3", "--height", "3", "--seed", "5", "--output", str(output)
            )
            self.assertEqual(code, 0)
            payload = json.loads(output.read_text(encoding="utf-8"))
            self.assertEqual(payload["width"], 3)
            self.assertEqual(len(payload["slots"]), 6)

            code, report = run_cli("validate", "--input", tmpdir)
            self.assertEqual(code, 0)
            self.assertIn("1/1 valid", report)

    def test_generate_prints_json_without_output(self) -> None:
        code, output = run_cli("generate", "--width", "3", "--height", "3", "--seed", "8")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(output)["height"], 3)

    def test_generate_failure_returns_error_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            wordlist = Path(tmpdir) / "words.txt"
            wordlist.write_text("CAT;50\nXYZ;50\n", encoding="utf-8")
            code, _ = run_cli(
                "generate",
                "--width",
                "3",
                "--height",
                "3",
                "--no-base-words",
                "--wordlist",
                str(wordlist),
            )
        self.assertEqual(code, 1)

    def test_validate_flags_invalid_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            bad = Path(tmpdir) / "bad.json"
            bad.write_text(
                json.dumps(
                    {
                        "width": 3,
                        "height": 3,
                        "grid": ["BAT", "ARE", "TEN"],
                        "slots": [],
                        "seed": None,
                    }
                ),
                encoding="utf-8",
            )
            code, report = run_cli("validate", "--input", str(bad))
        self.assertEqual(code, 1)
        self.assertIn("INVALID", report)


if __name__ == "__main__":
    unittest.main()
