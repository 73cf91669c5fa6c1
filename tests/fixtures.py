from types import TracebackType
from typing import Literal, Optional, Type
from pathlib import Path
from tempfile import mkdtemp
from shutil import rmtree
from textwrap import dedent


class FeatureFixture:
    datadir: Path

    def write(self, name: str, source: str) -> Path:
        path = self.datadir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(source).lstrip('\n'), encoding='utf-8')

        return path

    def __enter__(self) -> 'FeatureFixture':
        self.datadir = Path(mkdtemp(prefix='satisfy-'))

        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> Literal[True]:
        rmtree(self.datadir, ignore_errors=True)

        return True
