from .bootstrap import migrate
from .runner import MigrationReport, run_migration, summarize

__all__ = ["MigrationReport", "migrate", "run_migration", "summarize"]
