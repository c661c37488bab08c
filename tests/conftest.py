"""Shared fixtures: small pom.xml builders."""

from pathlib import Path

import pytest

POM_NS = "http://maven.apache.org/POM/4.0.0"


def pom_xml(
    *,
    properties: dict | None = None,
    dependencies: list[tuple] | None = None,
    url: str | None = None,
    issue_url: str | None = None,
    namespaced: bool = True,
) -> str:
    """Render a minimal pom. Dependencies are (group, artifact, version) tuples;
    a version of None omits the <version> element."""
    parts = ["<groupId>com.example</groupId>", "<artifactId>demo</artifactId>"]
    if url:
        parts.append(f"<url>{url}</url>")
    if issue_url:
        parts.append(f"<issueManagement><system>GitHub</system><url>{issue_url}</url></issueManagement>")
    if properties:
        props = "".join(f"<{k}>{v}</{k}>" for k, v in properties.items())
        parts.append(f"<properties>{props}</properties>")
    if dependencies:
        deps = []
        for group, artifact, version in dependencies:
            version_xml = f"<version>{version}</version>" if version is not None else ""
            deps.append(
                f"<dependency><groupId>{group}</groupId>"
                f"<artifactId>{artifact}</artifactId>{version_xml}</dependency>"
            )
        parts.append(f"<dependencies>{''.join(deps)}</dependencies>")

    ns = f' xmlns="{POM_NS}"' if namespaced else ""
    return f'<?xml version="1.0" encoding="UTF-8"?>\n<project{ns}>{"".join(parts)}</project>\n'


@pytest.fixture
def write_pom():
    def _write(path: Path, **kwargs) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(pom_xml(**kwargs), encoding="utf-8")
        return path
    return _write
