"""
End-to-end tests: version hint to installed toolchain through the CLI.
"""

import pytest
import responses

from cartonsdk.cli.parser import CLI
from cartonsdk.toolchain.release import infer_download_url
from tests.fixtures.toolchains import make_swift_archive

API = "https://api.github.com/repos/swiftwasm/swift/releases"
LINUX_URL = (
    "https://github.com/swiftwasm/swift/releases/download/swift-5.3/"
    "swift-5.3-ubuntu18.04_x86_64.tar.gz"
)
MACOS_URL = (
    "https://github.com/swiftwasm/swift/releases/download/swift-5.3/"
    "swift-5.3-macos_x86_64.tar.gz"
)


@pytest.mark.requires_tar
@responses.activate
def test_install_then_list(fake_home, project_dir, monkeypatch, capsys):
    """Install 5.3 on Linux from a two-asset release, then list it."""
    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setattr("cartonsdk.core.platform.platform.system", lambda: "Linux")

    archive = make_swift_archive("5.3")
    responses.add(
        responses.GET,
        f"{API}/tags/swift-5.3",
        json={
            "assets": [
                {
                    "name": "swift-5.3-macos_x86_64.tar.gz",
                    "browser_download_url": MACOS_URL,
                },
                {
                    "name": "swift-5.3-ubuntu18.04_x86_64.tar.gz",
                    "browser_download_url": LINUX_URL,
                },
            ]
        },
    )
    responses.add(
        responses.GET,
        LINUX_URL,
        body=archive,
        headers={"content-length": str(len(archive))},
    )

    cli_args = ["--project-root", str(project_dir)]
    assert CLI().run([*cli_args, "install", "5.3"]) == 0

    sdk_path = fake_home / ".carton" / "sdk"
    swift = sdk_path / "5.3" / "usr" / "bin" / "swift"
    assert swift.is_file()
    assert not (sdk_path / "5.3.tar.gz").exists()

    out = capsys.readouterr().out
    assert "Downloading the archive" in out
    assert f"Swift 5.3 is available at {swift}" in out

    assert CLI().run([*cli_args, "versions"]) == 0
    assert capsys.readouterr().out.splitlines() == ["  5.3"]


@pytest.mark.integration
def test_real_release_lookup():
    """Look up a published SwiftWasm release on GitHub."""
    url = infer_download_url("wasm-5.3.1-RELEASE", platform_family="linux")

    assert url is not None
    assert url.endswith(".tar.gz")
