# Values shared by fixtures and tests. None of them are real credentials.
API_KEY = "SECRET123"  # noqa: S105
ACCESS_TOKEN = "oauth-access-token-42"  # noqa: S105
PASSWORD = "hunter2-but-longer"  # noqa: S105
BASE_URL = "https://api.example.com/v1"
