from __future__ import annotations

import pytest
import yaml
from pydantic import ValidationError

from dockotter.adapters.pangolin import BlueprintTarget, to_blueprint
from dockotter.domain.derivation import derive
from tests.helpers.inventory import make_binding, make_entry


def test_blueprint_document_uses_pangolin_key_names() -> None:
    declaration = derive(
        make_entry("Shop", app_name="shop-a1b2c3", port=3000),
        make_binding("shop.example.com", path="/store", https=True),
    )

    document = yaml.safe_load(to_blueprint([declaration]).to_yaml())

    assert document == {
        "proxy-resources": [
            {
                "name": "shop-shop-example-com",
                "protocol": "http",
                "full-domain": "shop.example.com",
                "ssl": True,
                "enabled": True,
                "targets": [
                    {
                        "hostname": "shop-a1b2c3",
                        "port": 3000,
                        "method": "https",
                        "enabled": True,
                        "path": "/store",
                    }
                ],
            }
        ]
    }


def test_blueprint_omits_ssl_when_disabled() -> None:
    declaration = derive(make_entry(), make_binding(https=False))

    resource = to_blueprint([declaration]).to_document()["proxy-resources"]

    assert isinstance(resource, list)
    assert "ssl" not in resource[0]
    assert resource[0]["targets"][0]["port"] == 80


def test_blueprint_keeps_declaration_order() -> None:
    first = derive(make_entry("a"), make_binding("a.example.com"))
    second = derive(make_entry("b"), make_binding("b.example.com"))

    blueprint = to_blueprint([first, second])

    assert [resource.name for resource in blueprint.proxy_resources] == [
        "a-a-example-com",
        "b-b-example-com",
    ]


def test_blueprint_target_rejects_invalid_port() -> None:
    with pytest.raises(ValidationError):
        BlueprintTarget(hostname="web", port=0, method="http")
