"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from src.core.config.loader import CATALOG_ENV_VAR, load_catalog
from src.core.services.catalog_store import CatalogStore


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def _isolate_catalog_env(monkeypatch):
    """Keep a developer's LINITE_* environment out of the tests."""
    for name in (CATALOG_ENV_VAR, "LINITE_LOG_LEVEL", "LINITE_LOG_FILE", "LINITE_LOG_FILE_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def catalog_yml(tmp_path: Path) -> Path:
    """A small catalog.yml: Ubuntu with apt + flatpak, three apps."""
    content = textwrap.dedent("""\
        sources:
          - slug: apt
            name: APT
            install_cmd: apt install -y
            remove_cmd: apt remove -y
            require_sudo: true
            priority: 10
          - slug: flatpak
            name: Flatpak
            install_cmd: flatpak install -y flathub
            remove_cmd: flatpak uninstall -y
            priority: 5
            setup_cmd: flatpak remote-add --if-not-exists flathub https://flathub.org/repo/flathub.flatpakrepo
        platforms:
          - slug: ubuntu
            name: Ubuntu
            family: debian
            sources:
              - source: apt
                priority: 10
                default: true
              - source: flatpak
                priority: 5
          - slug: bare
            name: Bare Linux
        applications:
          - id: firefox
            name: Firefox
            packages:
              - source: apt
                identifier: firefox
              - source: flatpak
                identifier: org.mozilla.firefox
          - id: git
            name: Git
            packages:
              - source: apt
                identifier: git
          - id: vlc
            name: VLC
            packages:
              - source: flatpak
                identifier: org.videolan.VLC
    """)
    path = tmp_path / "catalog.yml"
    path.write_text(content)
    return path


@pytest.fixture
def bundled_catalog() -> CatalogStore:
    """The catalog shipped with the package."""
    from src.core.config.loader import BUNDLED_CATALOG

    return load_catalog(BUNDLED_CATALOG)
