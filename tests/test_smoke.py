import os
import re
import subprocess
import sys


def test_cli_output_block():
    repo_root = os.path.dirname(os.path.dirname(__file__))
    processes = os.path.join(repo_root, 'examples', 'processes.txt')

    result = subprocess.run(
        [sys.executable, os.path.join(repo_root, 'prioscheduler.py'), processes],
        capture_output=True,
        text=True,
        cwd=repo_root,
        check=False,
    )

    assert result.returncode == 0, f"Process exited with {result.returncode}, stderr: {result.stderr}"

    # Ensure the report is the last block and has one line per process
    lines = [ln for ln in result.stdout.splitlines() if ln.strip()]
    assert "output:" in lines, f"No report header\nFull output:\n{result.stdout}"
    report = lines[lines.index("output:") + 1:]
    assert len(report) == 10, f"Unexpected report:\n{result.stdout}"
    for ln in report:
        assert re.match(r"^\tP\d+,  turnaround time:\s+\d+,  wait time:\s+\d+$", ln), f"Unexpected line: {ln!r}"
