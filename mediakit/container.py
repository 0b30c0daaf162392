"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et les
integrations (scrapers fournis par l'appelant).
"""

from dependency_injector import containers, providers

from .adapters.cache import ScrapeCache
from .adapters.file_system import FileSystemAdapter
from .adapters.parsing.guessit_parser import GuessitFilenameParser
from .adapters.parsing.heuristic_parser import HeuristicFilenameParser
from .config import Settings
from .services.enricher import EnricherService
from .services.matcher import MatcherService
from .services.scanner import ScannerService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        scanner = container.scanner_service()
        enricher = container.enricher_service(scrapers=[MyScraper()])
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)

    # Parser choisi selon Settings.parser_backend
    filename_parser = providers.Selector(
        config.provided.parser_backend,
        heuristic=providers.Singleton(HeuristicFilenameParser),
        guessit=providers.Singleton(GuessitFilenameParser),
    )

    # Services
    scanner_service = providers.Factory(
        ScannerService,
        file_system=file_system,
        filename_parser=filename_parser,
        skip_samples=config.provided.skip_samples,
    )

    # Service de scoring (stateless - Singleton)
    matcher_service = providers.Singleton(
        MatcherService,
        threshold=config.provided.match_score_threshold,
    )

    # Cache des scrapers - Singleton partage, persistant sur disque
    scrape_cache = providers.Singleton(
        ScrapeCache,
        cache_dir=config.provided.scrape_cache_dir,
        size_limit=config.provided.scrape_cache_size_limit,
    )

    # Service d'enrichissement - Factory, les scrapers sont fournis a l'appel
    # Utiliser: container.enricher_service(scrapers=[...])
    enricher_service = providers.Factory(
        EnricherService,
        matcher=matcher_service,
        cache=scrape_cache,
    )
