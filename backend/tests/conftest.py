import os
import sys
import warnings
from pathlib import Path


BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

# Settings objects are built at import time; pin the values the tests rely on.
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ADMIN_SECRET", "test-admin-secret")
os.environ.setdefault("JOB_TRANSITION_MODE", "permissive")

# Passlib still imports the deprecated stdlib ``crypt`` module when available.
# Filter the warning globally so it doesn't pollute the test output.
warnings.filterwarnings(
    "ignore",
    category=DeprecationWarning,
    module=r"passlib\.utils.*",
)
