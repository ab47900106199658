from __future__ import annotations

import os

# app.main builds the application at import time and needs a resolvable URL.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
