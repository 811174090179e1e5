"""Workflow logger for capturing the steps of a generation run."""

import json
from datetime import datetime
from pathlib import Path


class WorkflowLogger:
    """Logger for capturing run steps to a timestamped log file."""

    def __init__(self, logs_dir: Path | str = "logs"):
        self.logs_dir = Path(logs_dir)
        self.logs_dir.mkdir(parents=True, exist_ok=True)

        # Create log file with timestamp
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        self.log_file = self.logs_dir / f"{timestamp}.log"
        self._initialized = False

    def _ensure_file(self) -> None:
        """Create log file with header if not yet initialized."""
        if not self._initialized:
            self._write_line("=" * 80)
            self._write_line(f"Eleventy Category Pages Run Log - {datetime.now().isoformat()}")
            self._write_line("=" * 80)
            self._write_line("")
            self._initialized = True

    def _write_line(self, line: str) -> None:
        """Write a line to the log file."""
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(line + "\n")

    def _write_section(self, title: str, content: str | dict | list | None = None) -> None:
        """Write a titled section to the log."""
        self._ensure_file()
        timestamp = datetime.now().strftime("%H:%M:%S")
        self._write_line(f"\n[{timestamp}] {title}")
        self._write_line("-" * 60)

        if content is not None:
            if isinstance(content, (dict, list)):
                self._write_line(json.dumps(content, indent=2, ensure_ascii=False, default=str))
            else:
                self._write_line(str(content))
        self._write_line("")

    def log_run_start(self, params: dict | None = None) -> None:
        """Log run start."""
        self._write_section("RUN START", params or {})

    def log_run_end(self, success: bool, summary: dict | None = None) -> None:
        """Log run completion."""
        status = "SUCCESS" if success else "FAILED"
        self._write_section(f"RUN END - {status}", summary or {})

    def log_files_scanned(self, root: Path, files: list[Path]) -> None:
        """Log the post files found under the posts folder."""
        self._write_section(
            f"FILES SCANNED: {len(files)} files",
            {"root": str(root), "files": [str(path) for path in files]},
        )

    def log_categories(self, categories: list[dict]) -> None:
        """Log the final category table."""
        self._write_section(f"CATEGORIES: {len(categories)} categories")

        self._write_line(f"{'Category':<40} {'Count':>6}  Description")
        self._write_line("-" * 70)
        for item in categories:
            name = str(item.get("category", ""))
            count = item.get("count", 0)
            description = str(item.get("description", ""))
            self._write_line(f"{name[:40]:<40} {count:>6}  {description[:40]}")

        self._write_line("")

    def log_skipped_files(self, files: list[Path]) -> None:
        """Log post files skipped because of front matter errors."""
        self._write_section(
            f"SKIPPED FILES: {len(files)} files", [str(path) for path in files]
        )

    def log_pages_written(self, output_dir: Path, pages: list[Path]) -> None:
        """Log generated category pages."""
        self._write_section(
            f"PAGES WRITTEN: {len(pages)} pages",
            {"output_dir": str(output_dir), "pages": [path.name for path in pages]},
        )

    def log_error(self, operation: str, error: Exception | str) -> None:
        """Log an error."""
        self._write_section(f"ERROR: {operation}", {
            "error_type": type(error).__name__ if isinstance(error, Exception) else "str",
            "message": str(error),
        })


def create_workflow_logger(logs_dir: Path | str = "logs") -> WorkflowLogger:
    """Create a new workflow logger."""
    return WorkflowLogger(logs_dir=logs_dir)
