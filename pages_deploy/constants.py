"""Global constants for pages-deploy"""

from enum import Enum

APP_NAME = "pages-deploy"

# Project identification
PROJECT_CONFIG_FILE = ".pages-deploy.yaml"

# Defaults
DEFAULT_BRANCH = "main"
DEFAULT_REMOTE = "origin"
DEFAULT_VCS_BACKEND = "git"
DEFAULT_REPORT_FILE = "deployment-report.json"
LOCK_FILE_PATTERN = "pages-deploy-{digest}.lock"  # created in the temp dir
DEFAULT_COMMAND_TIMEOUT = 120  # seconds
DEFAULT_COMMIT_MESSAGE = "Deploy: Force add ignored files for GitHub Pages - {timestamp}"

# Text the version-control tool prints when there is nothing to record
NOTHING_TO_COMMIT_MARKERS = (
    "nothing to commit",
    "nothing added to commit",
    "no changes added to commit",
)

LOG_FORMAT = "%(message)s"


class VcsBackend(Enum):
    GIT = "git"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "PD001"
    COMMAND_FAILED = "PD002"
    COMMAND_TIMEOUT = "PD003"
    REQUIRED_FILE_MISSING = "PD004"
    WRONG_REPOSITORY = "PD005"
    QUERY_FAILED = "PD006"
    STAGING_FAILED = "PD007"
    COMMIT_FAILED = "PD008"
    NOTHING_TO_COMMIT = "PD009"
    PUSH_FAILED = "PD010"
    DEPLOY_LOCKED = "PD011"
    PIPELINE_REUSED = "PD012"


# Environment variables
ENV_CONFIG_PATH = "PAGES_DEPLOY_CONFIG"
ENV_BRANCH = "PAGES_DEPLOY_BRANCH"
ENV_REMOTE = "PAGES_DEPLOY_REMOTE"
ENV_TIMEOUT = "PAGES_DEPLOY_TIMEOUT"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_INFO = "ℹ"
EMOJI_ROCKET = "🚀"
EMOJI_REPORT = "📊"
EMOJI_LINK = "🔗"

# Messages templates
MSG_MISSING_FILES = "Missing required files: {files}"
MSG_WRONG_REPOSITORY = "Not in the correct repository (remote '{remote}' is {url!r}, expected it to contain {identifier!r})"
MSG_STAGE_FAILED = "Failed to add {file}: {error}"
MSG_FILE_NOT_FOUND = "{file} not found"
MSG_REPORT_WRITE_FAILED = "Failed to write report to {path}: {error}"

# Next steps after a successful publish
NEXT_STEPS_SUCCESS_HEAD = "Wait 2-5 minutes for GitHub Pages to update"
NEXT_STEPS_SUCCESS_TEST_URL = "Test: {url}"
NEXT_STEPS_SUCCESS_TAIL = [
    "Check browser console for any errors",
    "Test PWA installation",
]

# Remediation after a failed run
NEXT_STEPS_FAILURE = [
    "Fix the errors listed above",
    "Run the deployment script again",
    "Contact support if issues persist",
]

# Stage specific remediation, keyed by PipelineStage value
NEXT_STEPS_BY_STAGE = {
    "verifying": "Restore or rebuild the missing files before deploying",
    "inspecting": "Run the deployment from a checkout of the expected repository with a reachable remote",
    "staging": "Check that the failed files are not locked and are inside the working tree",
    "committing": "Inspect the working tree and resolve the commit failure (hooks, identity, conflicts)",
    "publishing": "Pull or rebase against the remote branch and check push credentials",
    "reporting": "Point report_path at a writable file location",
}

CONFIG_TEMPLATE = """# pages-deploy configuration
#
# Environment variables like ${{HOME}} are expanded when the file is loaded.

# Substring the remote URL must contain to be treated as the deployment repository
repository_identifier: "{repository_identifier}"

# Branch pushed to the remote
branch: "{branch}"
remote: "{remote}"

# Files that must exist before anything is staged
required_files:
  - index.html

# Files force-added despite ignore rules, staged in this order
forced_files: []

# URLs to check once the deployment is live
verification_urls: []

# Optional settings
# commit_message: "Deploy site"
# report_path: {report_path}
# command_timeout: {command_timeout}
# strict_forced_files: false
"""

# JSON schema for .pages-deploy.yaml, checked before the file is turned into a config
_PATH_LIST_SCHEMA = {
    "anyOf": [
        {"type": "null"},
        {"type": "string"},
        {"type": "array", "items": {"type": "string"}},
    ]
}

CONFIG_SCHEMA = {
    "type": "object",
    "required": ["repository_identifier"],
    "properties": {
        "repository_identifier": {"type": "string", "minLength": 1},
        "branch": {"type": "string", "minLength": 1},
        "remote": {"type": "string", "minLength": 1},
        "required_files": _PATH_LIST_SCHEMA,
        "forced_files": _PATH_LIST_SCHEMA,
        "verification_urls": _PATH_LIST_SCHEMA,
        "commit_message": {"type": ["string", "null"]},
        "report_path": {"type": "string"},
        "command_timeout": {"type": ["number", "string", "null"]},
        "lock_file": {"type": ["string", "null"]},
        "strict_forced_files": {"type": "boolean"},
        "vcs": {"type": "string"},
    },
}
