# VANITY Derivation and Search Services
from vanity.services.search import SearchCoordinator, recommended_worker_count, run_search, run_search_sync

__all__ = ["SearchCoordinator", "recommended_worker_count", "run_search", "run_search_sync"]
