"""
Command generation — end-to-end install generation.

Drives ``generate_install_commands`` / ``build_install_result`` with
the simulated catalog: the reference Ubuntu scenario, preference
override, grouping, setup dedup, partial failures, hard failures,
Windows and Nix handling.
"""

from __future__ import annotations

import pytest

from src.core.models.catalog import Package
from src.core.models.generation import GenerationRequest
from src.core.services.command_gen import (
    GenerationError,
    NoApplicationsError,
    NoSourcesError,
    PlatformNotFoundError,
    build_install_result,
    generate_install_commands,
)
from tests.command_gen.simulated_catalog import (
    FLATHUB_SETUP,
    firefox,
    git,
    make_app,
    make_platform,
    nixos,
    scenario_store,
    ubuntu,
    vlc,
    windows,
)


def _generate(platform, app_ids, **kwargs):
    request = GenerationRequest(platform_slug=platform, application_ids=app_ids, **kwargs)
    return generate_install_commands(request, scenario_store())


# ── Reference scenario ────────────────────────────────────────


class TestUbuntuScenario:
    def test_commands(self):
        result = _generate("ubuntu", ["firefox", "git", "vlc"])
        assert result.commands == [
            "sudo apt install -y firefox git",
            "flatpak install -y flathub org.videolan.VLC",
        ]

    def test_setup_commands(self):
        result = _generate("ubuntu", ["firefox", "git", "vlc"])
        assert result.setup_commands == [FLATHUB_SETUP]

    def test_no_warnings(self):
        result = _generate("ubuntu", ["firefox", "git", "vlc"])
        assert result.warnings == []

    def test_breakdown(self):
        result = _generate("ubuntu", ["firefox", "git", "vlc"])
        assert [(b.source, b.packages) for b in result.breakdown] == [
            ("APT", ["firefox", "git"]),
            ("Flatpak", ["org.videolan.VLC"]),
        ]

    def test_deterministic(self):
        first = _generate("ubuntu", ["firefox", "git", "vlc"])
        second = _generate("ubuntu", ["firefox", "git", "vlc"])
        assert first.to_dict() == second.to_dict()

    def test_wire_format(self):
        data = _generate("ubuntu", ["vlc"]).to_dict()
        assert set(data) == {"commands", "setupCommands", "warnings", "breakdown"}
        assert data["breakdown"] == [{"source": "Flatpak", "packages": ["org.videolan.VLC"]}]


# ── Preference ────────────────────────────────────────────────


class TestPreference:
    def test_preferred_source_wins(self):
        result = _generate("ubuntu", ["firefox", "git"], preferred_source_slug="flatpak")
        assert result.commands == [
            "flatpak install -y flathub org.mozilla.firefox",
            "sudo apt install -y git",
        ]
        assert result.setup_commands == [FLATHUB_SETUP]

    def test_preference_breakdown_shows_only_preferred(self):
        result = _generate("ubuntu", ["firefox"], preferred_source_slug="flatpak")
        assert [b.source for b in result.breakdown] == ["Flatpak"]
        assert result.breakdown[0].packages == ["org.mozilla.firefox"]

    def test_preference_unknown_to_platform_is_ignored(self):
        result = _generate("ubuntu", ["firefox"], preferred_source_slug="pacman")
        assert result.commands == ["sudo apt install -y firefox"]


# ── Grouping & setup ──────────────────────────────────────────


class TestGrouping:
    def test_sources_in_first_seen_order(self):
        result = _generate("ubuntu", ["vlc", "firefox", "git"])
        assert result.commands == [
            "flatpak install -y flathub org.videolan.VLC",
            "sudo apt install -y firefox git",
        ]

    def test_duplicate_ids_collapse(self):
        result = _generate("ubuntu", ["git", "git"])
        assert result.commands == ["sudo apt install -y git"]

    def test_setup_once_per_source(self):
        apps = [vlc(), make_app("gimp", "GIMP", ("flatpak", "org.gimp.GIMP"))]
        result = build_install_result(ubuntu(), apps)
        assert result.commands == ["flatpak install -y flathub org.videolan.VLC org.gimp.GIMP"]
        assert result.setup_commands == [FLATHUB_SETUP]

    def test_three_apps_one_source(self):
        apps = [make_app(f"p{i}", f"P{i}", ("apt", f"p{i}")) for i in range(3)]
        result = build_install_result(ubuntu(), apps)
        assert result.commands == ["sudo apt install -y p0 p1 p2"]
        assert len(result.breakdown) == 1
        assert result.breakdown[0].source == "APT"
        assert result.breakdown[0].packages == ["p0", "p1", "p2"]

    def test_package_setup_before_source_setup(self):
        ppa = "add-apt-repository -y ppa:obsproject/obs-studio"
        obs = make_app(
            "obs", "OBS Studio",
            Package(source="apt", identifier="obs-studio", package_setup_cmd=ppa),
        )
        result = build_install_result(ubuntu(), [obs, vlc()])
        assert result.setup_commands == [ppa, FLATHUB_SETUP]

    def test_family_specific_package_setup(self):
        code = make_app(
            "vscode", "VS Code",
            Package(
                source="apt", identifier="code",
                package_setup_cmd={"debian": "echo deb", "rhel": "echo rpm"},
            ),
        )
        result = build_install_result(ubuntu(), [code])
        assert result.setup_commands == ["echo deb"]

    def test_family_specific_source_setup(self):
        spotify = make_app("spotify", "Spotify", ("snap", "spotify"))
        result = build_install_result(ubuntu(), [spotify])
        assert result.commands == ["sudo snap install spotify"]
        assert result.setup_commands == ["apt install -y snapd"]


# ── Partial failure ───────────────────────────────────────────


class TestPartialFailure:
    def test_unsatisfiable_app_warns(self):
        result = _generate("ubuntu", ["winonly", "git"])
        assert result.commands == ["sudo apt install -y git"]
        assert result.warnings == ["Windows Only: No package available for Ubuntu"]

    def test_unknown_ids_skipped(self):
        result = _generate("ubuntu", ["git", "does-not-exist"])
        assert result.commands == ["sudo apt install -y git"]
        assert result.warnings == []

    def test_nothing_installable_is_empty_not_error(self):
        result = _generate("ubuntu", ["winonly"])
        assert result.is_empty
        assert result.commands == []
        assert result.setup_commands == []
        assert result.breakdown == []
        assert len(result.warnings) == 1

    def test_unavailable_package_skipped(self):
        steam = make_app(
            "steam", "Steam",
            Package(source="apt", identifier="steam", is_available=False),
            ("flatpak", "com.valvesoftware.Steam"),
        )
        result = build_install_result(ubuntu(), [steam])
        assert result.commands == ["flatpak install -y flathub com.valvesoftware.Steam"]


# ── Hard failures ─────────────────────────────────────────────


class TestHardFailures:
    def test_unknown_platform(self):
        with pytest.raises(PlatformNotFoundError) as exc:
            _generate("beos", ["git"])
        assert str(exc.value) == "Distribution not found. Please select a valid Linux distribution."

    def test_platform_without_sources(self):
        with pytest.raises(NoSourcesError) as exc:
            _generate("empty", ["git"])
        assert str(exc.value) == 'No sources configured for distro "Empty Linux"'

    def test_no_known_apps(self):
        with pytest.raises(NoApplicationsError) as exc:
            _generate("ubuntu", ["nope", "nada"])
        assert str(exc.value) == "No apps found for the provided IDs"

    def test_platform_checked_before_apps(self):
        with pytest.raises(PlatformNotFoundError):
            _generate("beos", ["nope"])

    def test_all_are_generation_errors(self):
        for exc_type in (PlatformNotFoundError, NoSourcesError, NoApplicationsError):
            assert issubclass(exc_type, GenerationError)

    def test_pure_core_rejects_sourceless_platform(self):
        with pytest.raises(NoSourcesError):
            build_install_result(make_platform("bare", "Bare", []), [git()])


# ── Windows ───────────────────────────────────────────────────


class TestWindows:
    def test_no_sudo(self):
        app = make_app("git", "Git", ("winget", "Git.Git"))
        result = build_install_result(windows(), [app])
        assert result.commands == ["winget install -e --id Git.Git"]

    def test_script_install(self):
        bun = make_app(
            "bun", "Bun",
            Package(
                source="script", identifier="bun",
                metadata={"scriptUrl": {
                    "linux": "https://bun.sh/install",
                    "windows": "https://bun.sh/install.ps1",
                }},
            ),
        )
        result = build_install_result(windows(), [bun])
        assert result.commands == ["irm https://bun.sh/install.ps1 | iex"]
        assert [(b.source, b.packages) for b in result.breakdown] == [("Install Script", ["bun"])]


# ── Script source ─────────────────────────────────────────────


class TestScriptSource:
    def test_linux_script(self):
        rustup = make_app(
            "rustup", "Rustup",
            Package(source="script", identifier="rustup",
                    metadata={"scriptUrl": {"linux": "https://sh.rustup.rs"}}),
        )
        result = build_install_result(ubuntu(), [rustup, git()])
        assert result.commands == [
            "curl -fsSL https://sh.rustup.rs | bash",
            "sudo apt install -y git",
        ]
        assert result.setup_commands == []

    def test_missing_script_url_warns_and_omits_breakdown(self):
        winonly = make_app(
            "tool", "Tool",
            Package(source="script", identifier="tool",
                    metadata={"scriptUrl": {"windows": "https://x/install.ps1"}}),
        )
        result = build_install_result(ubuntu(), [winonly])
        assert result.commands == []
        assert result.breakdown == []
        assert result.warnings == ["Tool: No install script available for linux"]


# ── Nix ───────────────────────────────────────────────────────


class TestNix:
    def _apps(self):
        return [make_app("htop", "htop", ("nix", "htop")), make_app("git", "Git", ("nix", "git"))]

    def test_stock_templates_without_variant(self):
        result = build_install_result(nixos(), self._apps())
        assert result.commands == ["nix-env -iA nixpkgs. htop git"]
        assert result.setup_commands == [
            "nix-channel --add https://nixos.org/channels/nixpkgs-unstable"
        ]

    def test_nix_env_variant(self):
        result = build_install_result(nixos(), self._apps(), nix_installer_variant="nix-env")
        assert result.commands == ["nix-env -iA nixpkgs. htop git"]
        assert result.setup_commands == ["nix-channel --update"]

    def test_nix_flakes_variant(self):
        result = build_install_result(nixos(), self._apps(), nix_installer_variant="nix-flakes")
        assert result.commands == ["nix profile install nixpkgs# htop git"]
        assert len(result.setup_commands) == 1
        assert "nix-command flakes" in result.setup_commands[0]

    def test_nix_shell_variant_has_no_setup(self):
        result = build_install_result(nixos(), self._apps(), nix_installer_variant="nix-shell")
        assert result.commands == ["nix-shell -p htop git"]
        assert result.setup_commands == []

    def test_unknown_variant_falls_back_to_nix_shell(self):
        result = build_install_result(nixos(), self._apps(), nix_installer_variant="nix-magic")
        assert result.commands == ["nix-shell -p htop git"]

    def test_variant_does_not_touch_other_sources(self):
        result = build_install_result(
            nixos(), [firefox()], nix_installer_variant="nix-env",
        )
        assert result.commands == ["flatpak install -y flathub org.mozilla.firefox"]
        assert result.setup_commands == [FLATHUB_SETUP]
