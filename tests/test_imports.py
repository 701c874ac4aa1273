import importlib

MODULES = [
    'bookquotes.db.engine',
    'bookquotes.db.models',
    'bookquotes.repository.books',
    'bookquotes.repository.quotes',
    'bookquotes.services.crawl_controller',
    'bookquotes.services.scrape_runner',
    'bookquotes.api.app',
]

def test_imports():
    for m in MODULES:
        importlib.import_module(m)
