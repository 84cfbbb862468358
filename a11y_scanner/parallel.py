"""Bounded-concurrency batch scan.

Usage: a11y-scan-parallel <concurrency> <artifact-dir> <file>...

Every file becomes a job with two sub-tasks: the structured pass, written to
``<artifact-dir>/<name>.json``, and the human pass, written to
``<artifact-dir>/hr/<name>.txt``. At most ``concurrency`` jobs run at once.
A job fails when either sub-task ends with an execution error rather than a
scan outcome. Failures never stop sibling jobs. The process exits 3 when any
job failed.
"""

import os
import re
import subprocess
import sys
from collections import deque
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Dict, Iterator, List, Optional

from a11y_scanner.engine import scan_file
from a11y_scanner.errors import ScanError
from a11y_scanner.main import EXIT_CLEAN, EXIT_ERROR, EXIT_USAGE, EXIT_VIOLATIONS
from a11y_scanner.report import format_human, format_structured

SCAN_OUTCOME_CODES = {EXIT_CLEAN, EXIT_VIOLATIONS}
HUMAN_DIR = "hr"


class JobState(Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass
class SubTaskOutcome:
    exit_code: int
    output: str = ""
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code in SCAN_OUTCOME_CODES


@dataclass
class Job:
    file_path: str
    state: JobState = JobState.PENDING
    structured: Optional[SubTaskOutcome] = None
    human: Optional[SubTaskOutcome] = None
    error: str = ""

    @property
    def name(self) -> str:
        return os.path.basename(self.file_path)

    @property
    def failed(self) -> bool:
        if self.error:
            return True
        return not all(o is not None and o.ok for o in (self.structured, self.human))


@dataclass
class BatchResult:
    jobs: List[Job] = field(default_factory=list)
    failures: int = 0
    peak_in_flight: int = 0

    @property
    def exit_code(self) -> int:
        return EXIT_VIOLATIONS if self.failures else EXIT_CLEAN


class InProcessRunner:
    """Scans once and derives both renderings from the same result.

    Like every runner, ``run`` yields the structured outcome and then the
    human one, so the caller can persist each as soon as it exists.
    """

    def run(self, file_path: str) -> Iterator[SubTaskOutcome]:
        try:
            result = scan_file(file_path)
        except ScanError as e:
            failed = SubTaskOutcome(EXIT_ERROR, error=str(e))
            yield failed
            yield failed
            return

        code = EXIT_VIOLATIONS if result.has_violations else EXIT_CLEAN
        yield SubTaskOutcome(code, format_structured(result) + "\n")
        yield SubTaskOutcome(code, format_human(result) + "\n")


class SubprocessRunner:
    """Runs the single-file CLI as an external process, once per output format."""

    def __init__(self, python: str = sys.executable):
        self.python = python

    def _invoke(self, file_path: str, structured: bool) -> SubTaskOutcome:
        cmd = [self.python, "-m", "a11y_scanner.main", file_path]
        if structured:
            cmd.append("--structured")
        env = dict(os.environ, PYTHONIOENCODING="utf-8")
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            env=env,
        )
        return SubTaskOutcome(proc.returncode, proc.stdout, proc.stderr.strip())

    def run(self, file_path: str) -> Iterator[SubTaskOutcome]:
        yield self._invoke(file_path, structured=True)
        yield self._invoke(file_path, structured=False)


RUNNERS = {
    "inprocess": InProcessRunner,
    "subprocess": SubprocessRunner,
}


class ParallelScanner:
    def __init__(self, concurrency: int, artifact_dir: str, runner=None):
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        self.concurrency = concurrency
        self.artifact_dir = artifact_dir
        self.human_dir = os.path.join(artifact_dir, HUMAN_DIR)
        self.runner = runner or InProcessRunner()

    def structured_path(self, job: Job) -> str:
        return os.path.join(self.artifact_dir, job.name + ".json")

    def human_path(self, job: Job) -> str:
        return os.path.join(self.human_dir, job.name + ".txt")

    def _execute(self, job: Job) -> Job:
        passes = iter(self.runner.run(job.file_path))
        job.structured = next(passes)
        self._write(self.structured_path(job), job.structured.output)
        job.human = next(passes)
        self._write(self.human_path(job), job.human.output)
        return job

    @staticmethod
    def _write(path: str, text: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)

    def run(self, files: List[str]) -> BatchResult:
        os.makedirs(self.human_dir, exist_ok=True)

        batch = BatchResult(jobs=[Job(f) for f in files])
        pending: Deque[Job] = deque(batch.jobs)
        in_flight: Dict[Future, Job] = {}

        with ThreadPoolExecutor(max_workers=self.concurrency) as pool:
            while pending or in_flight:
                while pending and len(in_flight) < self.concurrency:
                    job = pending.popleft()
                    job.state = JobState.RUNNING
                    in_flight[pool.submit(self._execute, job)] = job
                batch.peak_in_flight = max(batch.peak_in_flight, len(in_flight))

                done, _ = wait(in_flight, return_when=FIRST_COMPLETED)
                for future in done:
                    job = in_flight.pop(future)
                    self._complete(job, future, batch)

        return batch

    def _complete(self, job: Job, future: Future, batch: BatchResult) -> None:
        try:
            future.result()
        except Exception as e:
            job.error = f"{type(e).__name__}: {e}"

        job.state = JobState.COMPLETED
        if job.failed:
            batch.failures += 1
            print(f"  ❌ {job.file_path}: {_failure_reason(job)}")
        else:
            marker = "⚠️" if _found_violations(job) else "✅"
            print(f"  {marker} {job.file_path}")


def _found_violations(job: Job) -> bool:
    return any(o is not None and o.exit_code == EXIT_VIOLATIONS for o in (job.structured, job.human))


def _failure_reason(job: Job) -> str:
    if job.error:
        return job.error
    for outcome in (job.structured, job.human):
        if outcome is not None and not outcome.ok:
            return outcome.error or f"exit code {outcome.exit_code}"
    return "unknown failure"


def _print_summary(batch: BatchResult, artifact_dir: str) -> None:
    print(f"\n{'='*50}")
    print("📊 Parallel Scan Summary")
    print(f"{'='*50}")
    print(f"  Files:     {len(batch.jobs)}")
    print(f"  Failed:    {batch.failures}")
    print(f"  Artifacts: {artifact_dir}")
    print(f"{'='*50}")


LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _parse_concurrency(raw: str) -> int:
    """Leading integer of ``raw`` (``"4x"`` is 4), at least 1."""
    m = LEADING_INTEGER.match(raw)
    return max(1, int(m.group(1))) if m else 1


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print(
            "Usage: a11y-scan-parallel <concurrency> <artifact-dir> <file1> <file2> ...",
            file=sys.stderr,
        )
        sys.exit(EXIT_USAGE)

    concurrency = _parse_concurrency(args[0])
    artifact_dir = args[1]
    files = args[2:]

    runner_name = os.environ.get("A11Y_SCAN_RUNNER", "inprocess").strip().lower()
    runner_cls = RUNNERS.get(runner_name)
    if runner_cls is None:
        print(f"⚠️ Unknown runner '{runner_name}', using inprocess")
        runner_cls = InProcessRunner

    print(f"▶ Scanning {len(files)} file(s) with concurrency {concurrency}")
    scanner = ParallelScanner(concurrency, artifact_dir, runner_cls())
    batch = scanner.run(files)
    _print_summary(batch, artifact_dir)

    sys.exit(batch.exit_code)


if __name__ == "__main__":
    main()
