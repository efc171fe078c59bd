from __future__ import annotations

API_UNIVERSITY = "university"
API_MAJOR = "major"
SUPPORTED_APIS = (API_UNIVERSITY, API_MAJOR)

JSON_SUFFIX = ".json"
JSON_INDENT = 2

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_EPSILON = 0.0

ACCESS_TOKEN_ENV = "GET_JSON_ACCESS_TOKEN"
LOG_LEVEL_ENV = "HIKAKU_LOG_LEVEL"

LEFT_LABEL = "dirA"
RIGHT_LABEL = "dirB"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
