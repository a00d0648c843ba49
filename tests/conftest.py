import pytest
from click.testing import CliRunner

from md2docx.config import FormattingOptions


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def strip_all() -> FormattingOptions:
    """Options with every strip switch enabled."""
    return FormattingOptions(strip_bold=True, strip_italic=True, strip_code=True)


@pytest.fixture()
def with_tables() -> FormattingOptions:
    return FormattingOptions(render_tables_as_text=True)
