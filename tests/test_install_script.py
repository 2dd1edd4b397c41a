"""
Tests for install script rendering.
"""

from src.core.models.generation import GenerationResult, UninstallResult
from src.core.services.install_script import render_install_script, render_uninstall_script


def _result():
    return GenerationResult(
        commands=["sudo apt install -y git"],
        setup_commands=["sudo apt update"],
    )


class TestRenderInstallScript:
    def test_bash_layout(self):
        script = render_install_script("ubuntu", _result())
        assert script.filename == "linite-install.sh"
        assert script.content == (
            "#!/bin/bash\n"
            "\n"
            "# Linite - Bulk Package Installer\n"
            "\n"
            "sudo apt update\n"
            "\n"
            "sudo apt install -y git\n"
        )

    def test_nixos_shebang(self):
        script = render_install_script("nixos", _result())
        assert script.content.startswith("#!/run/current-system/sw/bin/bash\n")

    def test_powershell(self):
        script = render_install_script("windows", GenerationResult(commands=["winget install -e --id Git.Git"]))
        assert script.filename == "linite-install.ps1"
        assert script.content.startswith("# Linite - Bulk Package Installer\n")
        assert 'Write-Host "Linite - Bulk Package Installer"' in script.content
        assert script.content.endswith("winget install -e --id Git.Git\n")

    def test_to_dict(self):
        data = render_install_script("ubuntu", _result()).to_dict()
        assert set(data) == {"filename", "content"}


class TestRenderUninstallScript:
    def test_sections_in_order(self):
        result = UninstallResult(
            cleanup_commands=["flatpak remote-delete flathub"],
            commands=["sudo apt remove -y git"],
            dependency_cleanup_commands=["sudo apt autoremove -y"],
        )
        script = render_uninstall_script("debian", result)
        assert script.filename == "linite-uninstall.sh"
        body = script.content
        assert body.index("flatpak remote-delete") < body.index("apt remove") < body.index("autoremove")
        assert "# Linite - Bulk Package Uninstaller" in body
