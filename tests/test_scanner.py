"""Tests for the scanner pipeline."""
import logging
from pathlib import Path

import httpx
import pytest

from license_classifier.exceptions import ScanError
from license_classifier.models.config import ClassifierConfig
from license_classifier.models.dependency import Dependency, Ecosystem
from license_classifier.models.license import RiskLevel
from license_classifier.scanner import classify_dependencies, load_dependencies, run_scan


def _registry_client() -> httpx.AsyncClient:
    """Client answering npm with MIT and PyPI with a GPL classifier."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "pypi.org":
            return httpx.Response(
                200,
                json={
                    "info": {
                        "license": None,
                        "classifiers": [
                            "License :: OSI Approved :: "
                            "GNU General Public License v3 (GPLv3)"
                        ],
                    }
                },
            )
        return httpx.Response(200, json={"license": "MIT"})

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestLoadDependencies:
    """Tests for load_dependencies."""

    def test_loads_list(self, write_manifest) -> None:
        path = write_manifest(
            [
                {"name": "express", "version": "4.18.2", "ecosystem": "npm"},
                {
                    "name": "click",
                    "version": "8.1.7",
                    "ecosystem": "pip",
                    "license": "BSD-3-Clause",
                },
            ]
        )

        deps = load_dependencies(path)

        assert [d.name for d in deps] == ["express", "click"]
        assert deps[0].license is None
        assert deps[1].ecosystem is Ecosystem.PIP

    def test_loads_wrapped_list(self, write_manifest) -> None:
        """Test the {"dependencies": [...]} manifest shape."""
        path = write_manifest(
            {"dependencies": [{"name": "serde", "version": "1.0.0", "ecosystem": "cargo"}]}
        )

        assert load_dependencies(path)[0].ecosystem is Ecosystem.CARGO

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ScanError, match="Cannot read dependency manifest"):
            load_dependencies(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "deps.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(ScanError, match="Invalid JSON"):
            load_dependencies(path)

    @pytest.mark.parametrize("data", [{"packages": []}, "express", 42])
    def test_wrong_shape(self, write_manifest, data: object) -> None:
        with pytest.raises(ScanError, match="expected a list of dependencies"):
            load_dependencies(write_manifest(data))

    def test_invalid_record(self, write_manifest) -> None:
        """Test that validation errors name the failing field."""
        path = write_manifest([{"name": "x", "version": "1.0.0", "ecosystem": "hex"}])

        with pytest.raises(ScanError, match="0.ecosystem"):
            load_dependencies(path)


class TestClassifyDependencies:
    """Tests for classify_dependencies."""

    def test_sorted_case_insensitively(self) -> None:
        deps = [
            Dependency(name=name, version="1.0.0", ecosystem=Ecosystem.NPM)
            for name in ("zod", "Axios", "lodash")
        ]

        classified = classify_dependencies(deps)

        assert [c.dependency.name for c in classified] == ["Axios", "lodash", "zod"]

    def test_recognized_flag(self) -> None:
        deps = [
            Dependency(name="a", version="1", ecosystem=Ecosystem.NPM, license="MIT"),
            Dependency(name="b", version="1", ecosystem=Ecosystem.NPM, license="Custom"),
            Dependency(name="c", version="1", ecosystem=Ecosystem.NPM),
        ]

        classified = classify_dependencies(deps)

        assert [c.recognized for c in classified] == [True, False, False]
        assert classified[2].license_info is None


class TestRunScan:
    """Tests for run_scan."""

    @pytest.mark.asyncio
    async def test_enriches_then_classifies(self) -> None:
        deps = [
            Dependency(name="left-pad", version="1.3.0", ecosystem=Ecosystem.NPM),
            Dependency(name="gpl-lib", version="2.0.0", ecosystem=Ecosystem.PIP),
            Dependency(name="serde", version="1.0.0", ecosystem=Ecosystem.CARGO),
        ]

        async with _registry_client() as client:
            result = await run_scan(deps, ClassifierConfig(), client=client)

        by_name = {c.dependency.name: c for c in result.dependencies}
        assert result.enriched_count == 2
        assert by_name["left-pad"].license_info.name == "MIT"  # type: ignore[union-attr]
        assert by_name["gpl-lib"].dependency.license == (
            "GNU General Public License v3 (GPLv3)"
        )
        assert by_name["gpl-lib"].license_info.risk == RiskLevel.HIGH  # type: ignore[union-attr]
        assert by_name["serde"].license_info is None
        assert result.summary.unknown_license_count == 1
        assert result.summary.copyleft_count == 1
        assert result.has_issues is False

    @pytest.mark.asyncio
    async def test_policy_applied_after_enrichment(self) -> None:
        deps = [Dependency(name="gpl-lib", version="2.0.0", ecosystem=Ecosystem.PIP)]
        config = ClassifierConfig(fail_on_copyleft=True)

        async with _registry_client() as client:
            result = await run_scan(deps, config, client=client)

        assert [v.rule for v in result.policy_violations] == ["no_copyleft"]
        assert result.has_issues is True

    @pytest.mark.asyncio
    async def test_skip_enrichment(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that no request is made when enrichment is disabled."""
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"license": "MIT"})

        deps = [Dependency(name="left-pad", version="1.3.0", ecosystem=Ecosystem.NPM)]
        config = ClassifierConfig(skip_enrichment=True)

        with caplog.at_level(logging.DEBUG, logger="license_classifier"):
            async with httpx.AsyncClient(
                transport=httpx.MockTransport(handler)
            ) as client:
                result = await run_scan(deps, config, client=client)

        assert calls == []
        assert result.enriched_count == 0
        assert result.dependencies[0].license_info is None
        assert "enrichment disabled" in caplog.text

    @pytest.mark.asyncio
    async def test_ignored_packages_are_not_looked_up(self) -> None:
        calls: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.path)
            return httpx.Response(200, json={"license": "MIT"})

        deps = [
            Dependency(name="internal", version="1.0.0", ecosystem=Ecosystem.NPM),
            Dependency(name="public", version="1.0.0", ecosystem=Ecosystem.NPM),
        ]
        config = ClassifierConfig(ignored_packages=["internal"])

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            result = await run_scan(deps, config, client=client)

        assert calls == ["/public/1.0.0"]
        assert [c.dependency.name for c in result.dependencies] == ["public"]
        assert result.summary.total_dependencies == 1
        assert result.ignored_packages_summary is not None
        assert result.ignored_packages_summary.ignored_names == ["internal"]

    @pytest.mark.asyncio
    async def test_registry_failures_do_not_fail_scan(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("offline", request=request)

        deps = [Dependency(name="left-pad", version="1.3.0", ecosystem=Ecosystem.NPM)]

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            result = await run_scan(deps, ClassifierConfig(), client=client)

        assert result.enriched_count == 0
        assert result.summary.unknown_license_count == 1

