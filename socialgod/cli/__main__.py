"""Allow running CLI as: python -m socialgod.cli"""

import sys
from pathlib import Path

from dotenv import load_dotenv

# .env next to pyproject.toml takes effect even when run from elsewhere
load_dotenv(Path(__file__).resolve().parents[2] / ".env")

from .main import main

sys.exit(main())
