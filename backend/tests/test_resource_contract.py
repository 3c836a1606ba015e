"""
Campus Data Backend — Generic CRUD Contract Tests
=================================================

What:  The behaviour every resource controller shares, run against all eight
       routers from one table of resource descriptions.

What we test:
    ✅ A created record reads back identically by its key
    ✅ get/update/delete on an absent key → 404 "<Entity> with id <key> not found"
    ✅ Regular users get 403 on update and delete; the record is unchanged
    ✅ Deleting twice reports 404 the second time
    ✅ Unexpected exceptions → generic 500 that hides the exception text
"""

from dataclasses import dataclass
from typing import Any, Dict

import pytest
from httpx import ASGITransport, AsyncClient

from campusdata.main import app
from campusdata.services.system_info_service import system_info_service
from conftest import ADMIN, USER


@dataclass
class Resource:
    entity: str
    prefix: str
    create_params: Dict[str, str]
    update_body: Dict[str, Any]
    key_param: str = "id"
    missing_key: Any = 4242
    # Natural-key resources echo the client's key under this response field
    key_field: str = "id"

    def key_of(self, record: Dict[str, Any]) -> Any:
        return record[self.key_field]

    def key_query(self, key: Any) -> Dict[str, Any]:
        return {self.key_param: key}


RESOURCES = [
    Resource(
        entity="UCSBDate",
        prefix="/api/ucsbdates",
        create_params={
            "quarterYYYYQ": "20221",
            "name": "Finals Begin",
            "localDateTime": "2022-12-01T00:00:00",
        },
        update_body={
            "quarterYYYYQ": "20222",
            "name": "Spring Break",
            "localDateTime": "2022-03-20T00:00:00",
        },
    ),
    Resource(
        entity="UCSBDiningCommons",
        prefix="/api/ucsbdiningcommons",
        key_param="code",
        key_field="code",
        missing_key="nowhere",
        create_params={
            "code": "ortega",
            "name": "Ortega",
            "hasSackMeal": "true",
            "hasTakeOutMeal": "true",
            "hasDiningCam": "true",
            "latitude": "34.410987",
            "longitude": "-119.84709",
        },
        update_body={
            "name": "Ortega Commons",
            "hasSackMeal": False,
            "hasTakeOutMeal": True,
            "hasDiningCam": False,
            "latitude": 34.41,
            "longitude": -119.85,
        },
    ),
    Resource(
        entity="UCSBDiningCommonsMenu",
        prefix="/api/ucsbdiningcommonsmenu",
        create_params={
            "diningCommonsCode": "ortega",
            "name": "Baked Pesto Pasta with Chicken",
            "station": "Entree Specials",
        },
        update_body={"diningCommonsCode": "dlg", "name": "Tofu Banh Mi", "station": "Grill"},
    ),
    Resource(
        entity="MenuItemReview",
        prefix="/api/menuitemreview",
        create_params={
            "itemId": "1",
            "reviewerEmail": "cgaucho@ucsb.edu",
            "stars": "5",
            "dateReviewed": "2023-07-29T00:00:00",
            "comments": "Best pasta on campus",
        },
        update_body={
            "itemId": 2,
            "reviewerEmail": "ldelplaya@ucsb.edu",
            "stars": 3,
            "dateReviewed": "2023-08-01T12:00:00",
            "comments": "Fine",
        },
    ),
    Resource(
        entity="RecommendationRequest",
        prefix="/api/recommendationrequest",
        create_params={
            "requesterEmail": "cgaucho@ucsb.edu",
            "professorEmail": "phtcon@ucsb.edu",
            "explanation": "BS/MS program",
            "dateRequested": "2022-04-20T00:00:00",
            "dateNeeded": "2022-05-01T00:00:00",
            "done": "false",
        },
        update_body={
            "requesterEmail": "ldelplaya@ucsb.edu",
            "professorEmail": "richert@ucsb.edu",
            "explanation": "PhD CS Stanford",
            "dateRequested": "2022-05-20T00:00:00",
            "dateNeeded": "2022-11-15T00:00:00",
            "done": True,
        },
    ),
    Resource(
        entity="UCSBOrganization",
        prefix="/api/ucsborganization",
        key_param="orgCode",
        key_field="orgCode",
        missing_key="NOPE",
        create_params={
            "orgCode": "ZPR",
            "orgTranslationShort": "ZETA PHI RHO",
            "orgTranslation": "ZETA PHI RHO FRATERNITY",
            "inactive": "false",
        },
        update_body={
            "orgTranslationShort": "ZPR",
            "orgTranslation": "ZETA PHI RHO",
            "inactive": True,
        },
    ),
    Resource(
        entity="HelpRequest",
        prefix="/api/helprequest",
        create_params={
            "requesterEmail": "cgaucho@ucsb.edu",
            "teamId": "s22-5pm-3",
            "tableOrBreakoutRoom": "7",
            "requestTime": "2022-04-20T17:35:00",
            "explanation": "Need help with Swagger-ui",
            "solved": "false",
        },
        update_body={
            "requesterEmail": "ldelplaya@ucsb.edu",
            "teamId": "s22-6pm-4",
            "tableOrBreakoutRoom": "13",
            "requestTime": "2022-04-21T18:00:00",
            "explanation": "Dokku problems",
            "solved": True,
        },
    ),
    Resource(
        entity="Article",
        prefix="/api/articles",
        create_params={
            "title": "Campus reopens",
            "url": "https://www.ucsb.edu/news",
            "explanation": "Dining commons reopen in the fall",
            "email": "cgaucho@ucsb.edu",
            "dateAdded": "2022-01-03T00:00:00",
        },
        update_body={
            "title": "Library hours",
            "url": "https://www.library.ucsb.edu",
            "explanation": "Open late during finals",
            "email": "ldelplaya@ucsb.edu",
            "dateAdded": "2022-03-11T00:00:00",
        },
    ),
]


@pytest.fixture(params=RESOURCES, ids=[r.entity for r in RESOURCES])
def resource(request) -> Resource:
    return request.param


async def create(client, resource: Resource) -> Dict[str, Any]:
    response = await client.post(
        f"{resource.prefix}/post", params=resource.create_params, headers=ADMIN
    )
    assert response.status_code == 200, response.text
    return response.json()


class TestCreateThenRead:
    @pytest.mark.asyncio
    async def test_created_record_reads_back_identically(self, test_client, resource):
        created = await create(test_client, resource)

        fetched = await test_client.get(
            resource.prefix, params=resource.key_query(resource.key_of(created)), headers=USER
        )
        assert fetched.status_code == 200
        assert fetched.json() == created

        listed = await test_client.get(f"{resource.prefix}/all", headers=USER)
        assert listed.json() == [created]

    @pytest.mark.asyncio
    async def test_update_replaces_every_field(self, test_client, resource):
        created = await create(test_client, resource)
        key = resource.key_of(created)

        response = await test_client.put(
            resource.prefix,
            params=resource.key_query(key),
            json=resource.update_body,
            headers=ADMIN,
        )

        assert response.status_code == 200
        assert response.json() == {resource.key_field: key, **resource.update_body}


class TestMissingKey:
    @pytest.mark.asyncio
    async def test_get_update_delete_report_not_found(self, test_client, resource):
        expected = f"{resource.entity} with id {resource.missing_key} not found"
        query = resource.key_query(resource.missing_key)

        responses = [
            await test_client.get(resource.prefix, params=query, headers=USER),
            await test_client.put(
                resource.prefix, params=query, json=resource.update_body, headers=ADMIN
            ),
            await test_client.delete(resource.prefix, params=query, headers=ADMIN),
        ]

        for response in responses:
            assert response.status_code == 404, response.request.method
            body = response.json()
            assert body["error"] == "not_found"
            assert body["message"] == expected

        listed = await test_client.get(f"{resource.prefix}/all", headers=USER)
        assert listed.json() == []


class TestRegularUserCannotMutate:
    @pytest.mark.asyncio
    async def test_update_and_delete_are_forbidden(self, test_client, resource):
        created = await create(test_client, resource)
        query = resource.key_query(resource.key_of(created))

        updated = await test_client.put(
            resource.prefix, params=query, json=resource.update_body, headers=USER
        )
        deleted = await test_client.delete(resource.prefix, params=query, headers=USER)

        assert updated.status_code == 403
        assert deleted.status_code == 403
        assert deleted.json()["error"] == "forbidden"

        fetched = await test_client.get(resource.prefix, params=query, headers=USER)
        assert fetched.json() == created


class TestDeleteTwice:
    @pytest.mark.asyncio
    async def test_second_delete_reports_not_found(self, test_client, resource):
        created = await create(test_client, resource)
        key = resource.key_of(created)
        query = resource.key_query(key)

        first = await test_client.delete(resource.prefix, params=query, headers=ADMIN)
        assert first.status_code == 200
        assert first.json() == {"message": f"{resource.entity} with id {key} deleted"}

        second = await test_client.delete(resource.prefix, params=query, headers=ADMIN)
        assert second.status_code == 404
        assert second.json()["message"] == f"{resource.entity} with id {key} not found"


class TestUnexpectedError:
    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_generic_500(self, monkeypatch):
        def explode():
            raise RuntimeError("secret connection string postgres://u:p@db")

        monkeypatch.setattr(system_info_service, "get_system_info", explode)
        # The error middleware re-raises after responding; keep the response
        transport = ASGITransport(app=app, raise_app_exceptions=False)

        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/systemInfo")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert body["type"] == "RuntimeError"
        assert "postgres" not in response.text
        assert "secret" not in body["message"]
