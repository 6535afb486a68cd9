import os
import tempfile

# Keeps test runs from writing into the repository log directory. Must be set before
# the log module is first imported.
os.environ.setdefault("PATHFOLLOW_LOG_DIR", tempfile.mkdtemp(prefix="pathfollow_log_"))
