"""Shared fixtures for Dokploy adapter tests."""

from __future__ import annotations

import pytest

from dockotter.config.dokploy import DokployConfig

DokployPayload = list[dict[str, object]]


@pytest.fixture
def dokploy_config() -> DokployConfig:
    return DokployConfig(base_url="http://dokploy.test", api_key="dokploy-key")


@pytest.fixture
def projects_payload() -> DokployPayload:
    return [
        {
            "projectId": "proj-1",
            "name": "Storefront",
            "description": "Customer facing apps",
            "createdAt": "2025-01-01T00:00:00.000Z",
            "applications": [
                {
                    "applicationId": "app-1",
                    "name": "Shop",
                    "appName": "shop-a1b2c3",
                    "description": None,
                    "applicationStatus": "done",
                    "port": 3000,
                    "projectId": "proj-1",
                    "domains": [
                        {
                            "domainId": "dom-1",
                            "host": "shop.example.com",
                            "path": "/",
                            "port": None,
                            "https": True,
                            "certificateType": "letsencrypt",
                        },
                        {
                            "domainId": "dom-2",
                            "host": "api.shop.example.com",
                            "path": "/v1",
                            "port": 8080,
                            "https": False,
                        },
                    ],
                },
                {
                    "applicationId": "app-2",
                    "name": "Worker",
                    "appName": "worker-d4e5f6",
                    "applicationStatus": "idle",
                    "domains": None,
                },
            ],
            "compose": [
                {
                    "composeId": "cmp-1",
                    "name": "Analytics",
                    "appName": "analytics-g7h8",
                    "composeStatus": "done",
                    "domains": [{"host": "stats.example.com", "https": False}],
                }
            ],
        },
        {"projectId": "proj-2", "name": "Empty", "applications": None, "compose": None},
    ]
