"""Shared test fixtures."""

import pytest


# ── Sample Dump Text ─────────────────────────────────────────────────────

OBJECT_DUMP = """\
--- dm_document ---
object_name : Quarterly Report
title : Q3 figures
r_object_id [ID] : 0900000180001234
r_object_type : dm_document
keywords[0] : finance
[1] : quarterly
r_version_label[0] : 1.0
[1] : CURRENT
i_vstamp [INT] : 3
a_content_type : pdf
authors[1] : bob
authors[0] : alice

---
"""

USER_DUMP = """\
user_name : Jane Doe
user_login_name : jdoe
user_address : jane.doe@example.com
user_privileges [INT] : 8
acl_name : dm_45000001800001a0
default_folder : /Jane Doe
user_email = jane.doe@example.com
r_object_id [ID] : 1100000180000a01
i_is_replica [BOOL] : F
user_state : 0
"""

GROUP_DUMP = """\
group_name : finance_team
description : Finance department
owner_name : dmadmin
is_private [BOOL] : F
users_names[0] : jdoe
[1] : asmith
[2] : bwhite
groups_names[0] : finance_auditors
r_object_id [ID] : 1200000180000b02
i_vstamp : 0
group_display_name : Finance Team
"""

CUSTOM_DUMP = """\
object_name : Contract 42
title : Supplier contract
start_pos : 2
contract_number : C-42
r_object_id [ID] : 0900000180005678
supplier : ACME
"""


@pytest.fixture
def object_dump():
    return OBJECT_DUMP


@pytest.fixture
def user_dump():
    return USER_DUMP


@pytest.fixture
def group_dump():
    return GROUP_DUMP


@pytest.fixture
def custom_dump():
    return CUSTOM_DUMP


@pytest.fixture
def dump_file(tmp_path):
    """Factory writing dump text to a temporary file and returning its path."""
    def _write(content: str, name: str = "dump.txt") -> str:
        path = tmp_path / name
        path.write_text(content, encoding='utf-8')
        return str(path)
    return _write
