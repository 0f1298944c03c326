import os

os.environ.setdefault("ACADEMY_ENV", "test")
