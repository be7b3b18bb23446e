"""API tests for PortalGate resources."""

import csv
import io

import pytest
from falcon.testing import TestClient

from tests.api.conftest import PASSWORD, login_headers


class TestHealth:
    def test_health_ok(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/health")
        assert r.status_code == 200
        assert r.json["status"] == "ok"

    def test_ready_reports_catalog(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/health/ready")
        assert r.status_code == 200
        assert r.json == {"status": "ready", "apps": 9, "roles": 5}


class TestAuth:
    def test_login_returns_token_and_user(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/auth/login", json={"email": "admin@acme.example", "password": PASSWORD}
        )
        assert r.status_code == 200
        assert r.json["token"]
        assert r.json["user"]["role"] == "admin"
        assert r.json["user"]["permissions"]["apps"] == ["*"]

    def test_login_bad_password(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/auth/login", json={"email": "admin@acme.example", "password": "x"}
        )
        assert r.status_code == 401
        assert r.json["error"] == "Invalid email or password"

    def test_login_inactive_account(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/auth/login", json={"email": "new.user@acme.example", "password": PASSWORD}
        )
        assert r.status_code == 401
        assert r.json["error"] == "Account is inactive. Please contact administrator."

    def test_login_missing_field(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/auth/login", json={"email": "admin@acme.example"})
        assert r.status_code == 400

    def test_login_non_object_body(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/auth/login", json=["admin@acme.example"])
        assert r.status_code == 400

    def test_me(self, client: TestClient, operator) -> None:
        r = client.simulate_get("/v1/auth/me", headers=operator)
        assert r.status_code == 200
        assert r.json["email"] == "operator@acme.example"
        assert r.json["last_login"] is not None

    def test_me_without_token(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/auth/me")
        assert r.status_code == 401

    def test_me_with_garbage_token(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/auth/me", headers={"Authorization": "Bearer nope"})
        assert r.status_code == 401
        assert r.json["error"].startswith("Invalid token")


class TestApps:
    def test_catalog_marks_accessible_apps(self, client: TestClient, operator) -> None:
        r = client.simulate_get("/v1/apps", headers=operator)
        assert r.status_code == 200
        flags = {a["id"]: a["accessible"] for a in r.json["items"]}
        assert len(flags) == 9
        assert flags["equipment-tracking"] is True
        assert flags["market-forecast"] is False

    def test_accessible_filter(self, client: TestClient, operator) -> None:
        r = client.simulate_get("/v1/apps", params={"accessible": "true"}, headers=operator)
        assert [a["id"] for a in r.json["items"]] == ["equipment-tracking"]

    def test_status_filter(self, client: TestClient, admin) -> None:
        r = client.simulate_get("/v1/apps", params={"status": "maintenance"}, headers=admin)
        assert [a["id"] for a in r.json["items"]] == ["inventory-management"]

    def test_launch(self, client: TestClient, manager) -> None:
        r = client.simulate_get("/v1/apps/market-forecast/launch", headers=manager)
        assert r.status_code == 200
        assert r.json["url"] == "http://forecast.test"

    def test_launch_without_access(self, client: TestClient, operator) -> None:
        r = client.simulate_get("/v1/apps/market-forecast/launch", headers=operator)
        assert r.status_code == 403

    def test_launch_coming_soon(self, client: TestClient, admin) -> None:
        r = client.simulate_get("/v1/apps/company-equity/launch", headers=admin)
        assert r.status_code == 409

    def test_launch_unknown_app(self, client: TestClient, admin) -> None:
        r = client.simulate_get("/v1/apps/ghost/launch", headers=admin)
        assert r.status_code == 404

    def test_users_with_access_admin_only(self, client: TestClient, admin, operator) -> None:
        r = client.simulate_get("/v1/apps/equipment-tracking/users", headers=admin)
        assert r.status_code == 200
        assert len(r.json["items"]) == 5
        r = client.simulate_get("/v1/apps/equipment-tracking/users", headers=operator)
        assert r.status_code == 403

    def test_grant_app_to_role(self, client: TestClient, admin, operator) -> None:
        r = client.simulate_post(
            "/v1/apps/reports-analytics/grants", json={"roles": ["operator"]}, headers=admin
        )
        assert r.status_code == 200
        r = client.simulate_get("/v1/apps/reports-analytics/launch", headers=operator)
        assert r.status_code == 200

    def test_grant_app_bad_body(self, client: TestClient, admin) -> None:
        r = client.simulate_post(
            "/v1/apps/reports-analytics/grants", json={"roles": "operator"}, headers=admin
        )
        assert r.status_code == 400


class TestUsers:
    def test_list_users_admin_only(self, client: TestClient, admin, operator) -> None:
        r = client.simulate_get("/v1/users", params={"role": "foreman"}, headers=admin)
        assert r.status_code == 200
        assert {u["id"] for u in r.json["items"]} == {"user-3", "user-6"}
        assert client.simulate_get("/v1/users", headers=operator).status_code == 403

    def test_create_and_get_user(self, client: TestClient, admin) -> None:
        r = client.simulate_post(
            "/v1/users",
            json={
                "email": "pat@acme.example",
                "first_name": "Pat",
                "last_name": "Lee",
                "role": "user",
            },
            headers=admin,
        )
        assert r.status_code == 201
        user_id = r.json["id"]
        assert r.json["permissions"]["groups"] == ["basic-access"]

        r = client.simulate_get(f"/v1/users/{user_id}", headers=admin)
        assert r.status_code == 200
        assert r.json["email"] == "pat@acme.example"

    def test_create_user_validation(self, client: TestClient, admin) -> None:
        r = client.simulate_post(
            "/v1/users",
            json={"email": "manager@acme.example", "first_name": "A", "last_name": "B", "role": "user"},
            headers=admin,
        )
        assert r.status_code == 400
        r = client.simulate_post("/v1/users", json={"email": "x@acme.example"}, headers=admin)
        assert r.status_code == 400

    def test_patch_user(self, client: TestClient, admin) -> None:
        r = client.simulate_patch("/v1/users/user-4", json={"department": "Yard"}, headers=admin)
        assert r.status_code == 200
        assert r.json["department"] == "Yard"

    def test_get_user_self_or_admin(self, client: TestClient, operator) -> None:
        assert client.simulate_get("/v1/users/user-4", headers=operator).status_code == 200
        assert client.simulate_get("/v1/users/user-3", headers=operator).status_code == 403

    def test_get_unknown_user(self, client: TestClient, admin) -> None:
        assert client.simulate_get("/v1/users/user-404", headers=admin).status_code == 404

    def test_user_apps(self, client: TestClient, admin, operator) -> None:
        r = client.simulate_get("/v1/users/user-4/apps", headers=operator)
        assert [a["id"] for a in r.json["items"]] == ["equipment-tracking"]
        r = client.simulate_get("/v1/users/user-3/apps", headers=operator)
        assert r.status_code == 403
        r = client.simulate_get("/v1/users/user-1/apps", headers=admin)
        assert len(r.json["items"]) == 9

    def test_grant_and_revoke_access(self, client: TestClient, admin, operator) -> None:
        r = client.simulate_post(
            "/v1/users/user-4/access/grant",
            json={"apps": ["safety-compliance"], "groups": ["basic-access"]},
            headers=admin,
        )
        assert r.status_code == 200
        assert "safety-compliance" in r.json["permissions"]["apps"]
        assert client.simulate_get(
            "/v1/apps/market-forecast/launch", headers=operator
        ).status_code == 200

        r = client.simulate_post(
            "/v1/users/user-4/access/revoke",
            json={"apps": ["safety-compliance"], "groups": ["basic-access"]},
            headers=admin,
        )
        assert r.status_code == 200
        assert r.json["permissions"]["apps"] == ["equipment-tracking"]
        assert r.json["permissions"]["groups"] == []

    def test_grant_unknown_app(self, client: TestClient, admin) -> None:
        r = client.simulate_post(
            "/v1/users/user-4/access/grant", json={"apps": ["ghost"]}, headers=admin
        )
        assert r.status_code == 400
        assert "ghost" in r.json["error"]

    def test_grant_requires_admin(self, client: TestClient, manager) -> None:
        r = client.simulate_post(
            "/v1/users/user-4/access/grant", json={"apps": ["market-forecast"]}, headers=manager
        )
        assert r.status_code == 403

    def test_grant_unknown_user(self, client: TestClient, admin) -> None:
        r = client.simulate_post(
            "/v1/users/user-404/access/grant", json={"apps": ["market-forecast"]}, headers=admin
        )
        assert r.status_code == 404

    def test_change_role(self, client: TestClient, admin) -> None:
        r = client.simulate_put("/v1/users/user-3/role", json={"role": "operator"}, headers=admin)
        assert r.status_code == 200
        assert r.json["role"] == "operator"
        assert r.json["permissions"]["apps"] == []
        r = client.simulate_put("/v1/users/user-3/role", json={"role": "wizard"}, headers=admin)
        assert r.status_code == 400

    def test_change_status_blocks_login(self, client: TestClient, admin) -> None:
        r = client.simulate_put("/v1/users/user-4/status", json={"status": "inactive"}, headers=admin)
        assert r.status_code == 200
        assert r.json["status"] == "inactive"
        r = client.simulate_post(
            "/v1/auth/login", json={"email": "operator@acme.example", "password": PASSWORD}
        )
        assert r.status_code == 401

    def test_bulk_operation(self, client: TestClient, admin) -> None:
        r = client.simulate_post(
            "/v1/users/bulk",
            json={
                "type": "grant_access",
                "user_ids": ["user-3", "user-4", "user-404"],
                "payload": {"apps": ["equipment-tracking"]},
            },
            headers=admin,
        )
        assert r.status_code == 200
        assert r.json["succeeded"] == ["user-3", "user-4"]
        assert r.json["skipped"] == ["user-404"]
        assert r.json["skipped_count"] == 1

    @pytest.mark.parametrize(
        "payload",
        [{"role": ["admin"]}, {"role": 7}, {"status": {"value": "active"}}],
    )
    def test_bulk_rejects_non_string_role_or_status(
        self, client: TestClient, admin, payload
    ) -> None:
        op = "update_role" if "role" in payload else "update_status"
        r = client.simulate_post(
            "/v1/users/bulk",
            json={"type": op, "user_ids": ["user-2"], "payload": payload},
            headers=admin,
        )
        assert r.status_code == 400
        r = client.simulate_get("/v1/users/user-2", headers=admin)
        assert r.json["role"] == "manager"
        assert r.json["status"] == "active"

    def test_grant_rejects_non_string_role(self, client: TestClient, admin) -> None:
        r = client.simulate_post(
            "/v1/users/user-4/access/grant",
            json={"apps": ["market-forecast"], "role": ["admin"]},
            headers=admin,
        )
        assert r.status_code == 400
        r = client.simulate_get("/v1/users/user-4", headers=admin)
        assert r.json["role"] == "operator"
        assert r.json["permissions"]["apps"] == ["equipment-tracking"]

    def test_create_user_rejects_non_string_copy_source(self, client: TestClient, admin) -> None:
        r = client.simulate_post(
            "/v1/users",
            json={
                "email": "pat@acme.example",
                "first_name": "Pat",
                "last_name": "Lee",
                "role": "user",
                "copy_from_user_id": ["user-2"],
            },
            headers=admin,
        )
        assert r.status_code == 400

    def test_bulk_unknown_type(self, client: TestClient, admin) -> None:
        r = client.simulate_post(
            "/v1/users/bulk", json={"type": "explode", "user_ids": []}, headers=admin
        )
        assert r.status_code == 400


class TestGroups:
    def test_list_groups_for_any_user(self, client: TestClient, operator) -> None:
        r = client.simulate_get("/v1/groups", headers=operator)
        assert r.status_code == 200
        assert len(r.json["items"]) == 4

    def test_group_lifecycle(self, client: TestClient, admin) -> None:
        r = client.simulate_post(
            "/v1/groups",
            json={"name": "Field Kit", "apps": ["equipment-tracking"]},
            headers=admin,
        )
        assert r.status_code == 201
        group_id = r.json["id"]

        r = client.simulate_patch(
            f"/v1/groups/{group_id}", json={"description": "Yard tools"}, headers=admin
        )
        assert r.status_code == 200
        assert r.json["description"] == "Yard tools"
        assert client.simulate_get(f"/v1/groups/{group_id}", headers=admin).status_code == 200

        r = client.simulate_delete(f"/v1/groups/{group_id}", headers=admin)
        assert r.status_code == 204
        assert client.simulate_get(f"/v1/groups/{group_id}", headers=admin).status_code == 404

    def test_create_group_requires_admin(self, client: TestClient, operator) -> None:
        r = client.simulate_post(
            "/v1/groups", json={"name": "Mine", "apps": ["market-forecast"]}, headers=operator
        )
        assert r.status_code == 403


class TestRoles:
    def test_roles_table(self, client: TestClient, operator) -> None:
        r = client.simulate_get("/v1/roles", headers=operator)
        assert r.status_code == 200
        assert [role["id"] for role in r.json["items"]] == [
            "admin",
            "manager",
            "foreman",
            "operator",
            "user",
        ]


class TestAudit:
    def test_audit_lists_mutations(self, client: TestClient, admin) -> None:
        client.simulate_put("/v1/users/user-7/status", json={"status": "active"}, headers=admin)
        r = client.simulate_get("/v1/audit", params={"action": "status_changed"}, headers=admin)
        assert r.status_code == 200
        assert len(r.json["items"]) == 1
        assert r.json["items"][0]["subject"] == "user-7"

    def test_audit_bad_range(self, client: TestClient, admin) -> None:
        r = client.simulate_get("/v1/audit", params={"range": "decade"}, headers=admin)
        assert r.status_code == 400

    def test_audit_admin_only(self, client: TestClient, operator) -> None:
        assert client.simulate_get("/v1/audit", headers=operator).status_code == 403

    def test_export_csv(self, client: TestClient, admin) -> None:
        client.simulate_put("/v1/users/user-7/status", json={"status": "active"}, headers=admin)
        r = client.simulate_get("/v1/audit/export", params={"format": "csv"}, headers=admin)
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/csv")
        assert "audit-log.csv" in r.headers["content-disposition"]
        rows = list(csv.DictReader(io.StringIO(r.text)))
        assert rows[0]["action"] == "status_changed"

    def test_export_unknown_format(self, client: TestClient, admin) -> None:
        r = client.simulate_get("/v1/audit/export", params={"format": "xml"}, headers=admin)
        assert r.status_code == 400


class TestChat:
    def test_feed(self, client: TestClient, operator) -> None:
        r = client.simulate_get("/v1/chat/messages", headers=operator)
        assert r.status_code == 200
        assert r.json["unread_count"] == 3
        assert r.json["items"][0]["id"] == "msg-3"

    def test_post_read_react(self, client: TestClient, operator) -> None:
        r = client.simulate_post(
            "/v1/chat/messages", json={"content": "Crane inspected", "type": "update"}, headers=operator
        )
        assert r.status_code == 201
        assert r.json["is_read"] is True

        r = client.simulate_post("/v1/chat/messages/msg-2/read", headers=operator)
        assert r.status_code == 200
        assert r.json["is_read"] is True

        r = client.simulate_post(
            "/v1/chat/messages/msg-2/reactions", json={"emoji": "🔥"}, headers=operator
        )
        assert r.status_code == 200
        assert r.json["reactions"][0]["emoji"] == "🔥"

    def test_post_bad_type(self, client: TestClient, operator) -> None:
        r = client.simulate_post(
            "/v1/chat/messages", json={"content": "hi", "type": "shout"}, headers=operator
        )
        assert r.status_code == 400

    def test_pin_requires_manager(self, client: TestClient, manager, operator) -> None:
        assert client.simulate_post("/v1/chat/messages/msg-2/pin", headers=operator).status_code == 403
        r = client.simulate_post("/v1/chat/messages/msg-2/pin", headers=manager)
        assert r.status_code == 200
        assert r.json["is_pinned"] is True

    def test_missing_message(self, client: TestClient, operator) -> None:
        r = client.simulate_post("/v1/chat/messages/msg-404/read", headers=operator)
        assert r.status_code == 404

    def test_announcements_dismiss(self, client: TestClient, operator) -> None:
        r = client.simulate_get("/v1/chat/announcements", headers=operator)
        assert [a["id"] for a in r.json["items"]] == ["ann-1"]
        r = client.simulate_post("/v1/chat/announcements/ann-1/dismiss", headers=operator)
        assert r.status_code == 204
        r = client.simulate_get("/v1/chat/announcements", headers=operator)
        assert r.json["items"] == []

    def test_chat_requires_login(self, client: TestClient) -> None:
        assert client.simulate_get("/v1/chat/messages").status_code == 401


class TestCors:
    def test_allowed_origin_echoed(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/health", headers={"Origin": "http://portal.test"})
        assert r.headers["access-control-allow-origin"] == "http://portal.test"

    def test_other_origin_not_allowed(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/health", headers={"Origin": "http://evil.test"})
        assert "access-control-allow-origin" not in r.headers


def test_sessions_are_per_user(client: TestClient) -> None:
    foreman = login_headers(client, "foreman@acme.example")
    r = client.simulate_get("/v1/auth/me", headers=foreman)
    assert r.json["id"] == "user-3"
