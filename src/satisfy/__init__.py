from importlib.metadata import version, PackageNotFoundError


try:
    __version__ = version('satisfy-gherkin')
except PackageNotFoundError:
    __version__ = 'unknown'
