import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def test_data_models_import_on_their_own():
    # A fresh interpreter, so modules already imported by the suite do not mask a cycle.
    code = (
        "from netsweep.core.data_models import ScanResult; "
        "print(ScanResult(address=167772161, alive=True).ip)"
    )
    output = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True, text=True, check=True, cwd=str(PROJECT_ROOT),
    ).stdout
    assert output.strip() == "10.0.0.1"
