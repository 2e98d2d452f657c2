"""Root conftest — shared test configuration."""

import os

# Ensure tests never point at a real deployment
os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DATABASE", "userinfo_test")
os.environ.setdefault("LOG_FORMAT", "text")
