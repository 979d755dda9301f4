"""Tests for project ID generation and validation."""

import pytest

from prjboard.domain.ids import ID_PREFIX, generate_project_id, validate_id


class TestGenerateProjectId:
    def test_prefix_and_length(self) -> None:
        project_id = generate_project_id()
        assert project_id.startswith(ID_PREFIX)
        assert len(project_id) == 12  # "prj_" (4) + 8 hex chars

    def test_matches_pattern(self) -> None:
        assert validate_id(generate_project_id())

    def test_successive_ids_differ(self) -> None:
        ids = {generate_project_id() for _ in range(50)}
        assert len(ids) == 50


class TestValidateId:
    @pytest.mark.parametrize("project_id", ["prj_abcd1234", "prj_00ff99aa"])
    def test_valid_ids(self, project_id: str) -> None:
        assert validate_id(project_id)

    @pytest.mark.parametrize(
        "project_id",
        [
            "prj_ABCD1234",  # uppercase hex
            "prj_abc",  # too short
            "prj_abcd12345",  # too long
            "ztl_abcd1234",  # wrong prefix
        ],
    )
    def test_invalid_ids(self, project_id: str) -> None:
        assert not validate_id(project_id)
