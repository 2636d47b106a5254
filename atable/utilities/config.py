"""Configuration management for the Atable planning core."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Generation Settings
DEFAULT_WEEKS: Final[int] = int(os.getenv('ATABLE_DEFAULT_WEEKS', '2'))
WEEK_MAX_ATTEMPTS: Final[int] = int(os.getenv('ATABLE_WEEK_MAX_ATTEMPTS', '10'))
SINGLE_MAX_ATTEMPTS: Final[int] = int(os.getenv('ATABLE_SINGLE_MAX_ATTEMPTS', '20'))
