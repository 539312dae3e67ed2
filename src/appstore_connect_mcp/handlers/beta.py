"""
TestFlight beta group and tester operations.
"""

from typing import Any, Dict, Optional

from ..client import AppStoreConnectClient
from ..utils import sanitize_limit, validate_required


class BetaHandlers:
    """Handlers for the beta testing tools."""

    def __init__(self, client: AppStoreConnectClient):
        self.client = client

    def list_beta_groups(self, limit: Optional[int] = 100) -> Dict[str, Any]:
        """Get a list of all beta groups (internal and external)."""
        return self.client.get(
            "/betaGroups",
            {"limit": sanitize_limit(limit), "include": "app,betaTesters"},
        )

    def list_group_testers(self, groupId: str = None, limit: Optional[int] = 100) -> Dict[str, Any]:
        """Get a list of all testers in a specific beta group."""
        validate_required({"groupId": groupId}, ["groupId"])
        return self.client.get(
            f"/betaGroups/{groupId}/betaTesters", {"limit": sanitize_limit(limit)}
        )

    def add_tester_to_group(
        self,
        groupId: str = None,
        email: str = None,
        firstName: str = None,
        lastName: str = None,
    ) -> Dict[str, Any]:
        """Create a beta tester and attach them to a group in one call."""
        args = {"groupId": groupId, "email": email, "firstName": firstName, "lastName": lastName}
        validate_required(args, ["groupId", "email", "firstName", "lastName"])

        body = {
            "data": {
                "type": "betaTesters",
                "attributes": {"email": email, "firstName": firstName, "lastName": lastName},
                "relationships": {
                    "betaGroups": {"data": [{"id": groupId, "type": "betaGroups"}]}
                },
            }
        }
        return self.client.post("/betaTesters", body)

    def remove_tester_from_group(self, groupId: str = None, testerId: str = None) -> Dict[str, Any]:
        """Remove a tester from a beta group."""
        validate_required({"groupId": groupId, "testerId": testerId}, ["groupId", "testerId"])

        body = {"data": [{"id": testerId, "type": "betaTesters"}]}
        self.client.delete(f"/betaGroups/{groupId}/relationships/betaTesters", body)
        return {"success": True, "groupId": groupId, "testerId": testerId}
