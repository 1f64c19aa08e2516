"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

from domain.exceptions import ConfigurationError

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _clean_key(raw: str) -> str:
    return raw.strip().strip('"').strip("'").strip()


class Settings:
    """
    Every value is read once from the environment (after config/.env is
    loaded). Tests and the CLI override attributes on the instance.
    """

    RIOT_API_KEY: str = _clean_key(os.getenv('RIOT_API_KEY', ''))

    # ── Routing ────────────────────────────────────────────────────────────
    # account + match endpoints live on the regional route,
    # summoner + league + mastery endpoints on the platform route.
    RIOT_REGIONAL_ROUTE:   str = os.getenv('RIOT_REGIONAL_ROUTE', 'asia').strip().lower()
    RIOT_DEFAULT_PLATFORM: str = os.getenv('RIOT_DEFAULT_PLATFORM', 'kr').strip().lower()

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = float(os.getenv('REQUEST_TIMEOUT', '10'))
    CONNECT_TIMEOUT: float = float(os.getenv('CONNECT_TIMEOUT', '5'))

    # Riot personal key hard limits: 20/s and 100/120s
    RATE_LIMIT_PER_1_SEC: int = int(os.getenv('RATE_LIMIT_PER_1_SEC', '18'))
    RATE_LIMIT_PER_2_MIN: int = int(os.getenv('RATE_LIMIT_PER_2_MIN', '90'))

    # ── Match history ──────────────────────────────────────────────────────
    DEFAULT_MATCH_COUNT:     int = int(os.getenv('DEFAULT_MATCH_COUNT', '5'))
    MAX_MATCH_COUNT:         int = int(os.getenv('MAX_MATCH_COUNT', '10'))
    MATCH_ID_CEILING:        int = int(os.getenv('MATCH_ID_CEILING', '20'))
    MATCH_FETCH_CONCURRENCY: int = int(os.getenv('MATCH_FETCH_CONCURRENCY', '4'))
    MATCH_FAILURE_POLICY:    str = os.getenv('MATCH_FAILURE_POLICY', 'fail_fast').strip().lower()

    PROFILE_RECENT_MATCHES: int = 5
    PROFILE_TOP_CHAMPIONS:  int = 3

    # ── Collaborators ──────────────────────────────────────────────────────
    CLIENT_MODE:        str = os.getenv('CLIENT_MODE', 'http').strip().lower()
    FIXTURE_FILE:       str = os.getenv('FIXTURE_FILE', '')
    CACHE_BACKEND:      str = os.getenv('CACHE_BACKEND', 'none').strip().lower()
    CACHE_TTL_SECONDS:  int = int(os.getenv('CACHE_TTL_SECONDS', '60'))
    CHAMPION_DATA_FILE: str = os.getenv('CHAMPION_DATA_FILE', '')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = BASE_DIR / 'data'
    CACHE_DB: Path = DATA_DIR / 'cache' / 'responses.sqlite'
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(DATA_DIR / 'logs')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    _CHOICES = {
        'RIOT_REGIONAL_ROUTE':  ('asia', 'americas', 'europe'),
        'MATCH_FAILURE_POLICY': ('fail_fast', 'partial'),
        'CLIENT_MODE':          ('http', 'fixture'),
        'CACHE_BACKEND':        ('none', 'memory', 'sqlite'),
    }

    def validate(self) -> None:
        if self.CLIENT_MODE == 'http' and not _clean_key(self.RIOT_API_KEY):
            raise ConfigurationError("RIOT_API_KEY must be set in config/.env")
        for name, allowed in self._CHOICES.items():
            value = getattr(self, name)
            if value not in allowed:
                raise ConfigurationError(
                    f"{name} must be one of {', '.join(allowed)}",
                    details={"setting": name, "value": value},
                )
        if self.MAX_MATCH_COUNT < 1 or self.MATCH_FETCH_CONCURRENCY < 1:
            raise ConfigurationError("MAX_MATCH_COUNT and MATCH_FETCH_CONCURRENCY must be positive")

    def create_directories(self) -> None:
        self.LOG_DIR.mkdir(parents=True, exist_ok=True)
        if self.CACHE_BACKEND == 'sqlite':
            self.CACHE_DB.parent.mkdir(parents=True, exist_ok=True)


settings = Settings()
