"""
Integration tests for the entity resources.

These tests drive the HTTP surface end to end through DRF's APIClient
against the test database: status codes, alert and pagination headers,
and the row counts left behind by each write.

To run the tests:

```
pytest -q core/tests
```
"""

from rest_framework import status
from rest_framework.test import APITestCase

from ..models import District

DEFAULT_DISTRICT = "AAAAAAAAAA"
UPDATED_DISTRICT = "BBBBBBBBBB"
ALERT = "X-hospitalManagementApp-alert"
PARAMS = "X-hospitalManagementApp-params"
ERROR = "X-hospitalManagementApp-error"


class DistrictResourceTests(APITestCase):
    def setUp(self) -> None:
        self.district = District(district=DEFAULT_DISTRICT)

    def test_create_district(self):
        size_before = District.objects.count()
        response = self.client.post("/api/districts", {"district": DEFAULT_DISTRICT}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        districts = list(District.objects.order_by("id"))
        self.assertEqual(len(districts), size_before + 1)
        created = districts[-1]
        self.assertEqual(created.district, DEFAULT_DISTRICT)
        self.assertEqual(response.data["id"], created.id)
        self.assertEqual(response["Location"], f"/api/districts/{created.id}")
        self.assertEqual(response[ALERT], "hospitalManagementApp.district.created")
        self.assertEqual(response[PARAMS], str(created.id))

    def test_create_district_with_existing_id(self):
        self.district.save()
        size_before = District.objects.count()
        response = self.client.post(
            "/api/districts", {"id": self.district.id, "district": DEFAULT_DISTRICT}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(District.objects.count(), size_before)
        self.assertFalse(response.data["ok"])
        self.assertEqual(response.data["error"]["code"], "idexists")
        self.assertEqual(response.data["error"]["entity"], "district")
        self.assertEqual(response[ERROR], "error.idexists")
        self.assertEqual(response[PARAMS], "district")

    def test_create_district_with_invalid_fields(self):
        response = self.client.post("/api/districts", {"district": ""}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "api_error")
        self.assertIn("district", response.data["error"]["message"])
        self.assertEqual(District.objects.count(), 0)

    def test_get_all_districts(self):
        self.district.save()
        other = District.objects.create(district=UPDATED_DISTRICT)
        response = self.client.get("/api/districts?sort=id,desc")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([d["id"] for d in response.data], [other.id, self.district.id])
        self.assertEqual([d["district"] for d in response.data], [UPDATED_DISTRICT, DEFAULT_DISTRICT])
        self.assertEqual(response["X-Total-Count"], "2")
        self.assertIn('rel="first"', response["Link"])

    def test_get_district(self):
        self.district.save()
        response = self.client.get(f"/api/districts/{self.district.id}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"id": self.district.id, "district": DEFAULT_DISTRICT})

    def test_get_non_existing_district(self):
        response = self.client.get(f"/api/districts/{2 ** 63 - 1}")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.content, b"")

    def test_update_district(self):
        self.district.save()
        size_before = District.objects.count()
        response = self.client.put(
            "/api/districts", {"id": self.district.id, "district": UPDATED_DISTRICT}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(District.objects.count(), size_before)
        self.district.refresh_from_db()
        self.assertEqual(self.district.district, UPDATED_DISTRICT)
        self.assertEqual(response[ALERT], "hospitalManagementApp.district.updated")
        self.assertEqual(response[PARAMS], str(self.district.id))

    def test_update_without_id_creates(self):
        response = self.client.put("/api/districts", {"district": DEFAULT_DISTRICT}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(District.objects.count(), 1)
        self.assertEqual(response[ALERT], "hospitalManagementApp.district.created")

    def test_update_with_fractional_id_is_rejected(self):
        self.district.save()
        response = self.client.put(
            "/api/districts", {"id": self.district.id + 0.7, "district": UPDATED_DISTRICT}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("id", response.data["error"]["message"])
        self.district.refresh_from_db()
        self.assertEqual(self.district.district, DEFAULT_DISTRICT)

    def test_update_unknown_id_inserts_under_that_id(self):
        response = self.client.put("/api/districts", {"id": 4242, "district": UPDATED_DISTRICT}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(District.objects.get(pk=4242).district, UPDATED_DISTRICT)

    def test_delete_district(self):
        self.district.save()
        size_before = District.objects.count()
        response = self.client.delete(f"/api/districts/{self.district.id}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(District.objects.count(), size_before - 1)
        self.assertEqual(response[ALERT], "hospitalManagementApp.district.deleted")

    def test_delete_absent_district_still_succeeds(self):
        response = self.client.delete("/api/districts/987654")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_district_lifecycle(self):
        self.assertEqual(District.objects.count(), 0)
        created = self.client.post("/api/districts", {"district": DEFAULT_DISTRICT}, format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        self.assertEqual(District.objects.count(), 1)
        pk = created.data["id"]

        fetched = self.client.get(f"/api/districts/{pk}")
        self.assertEqual(fetched.status_code, status.HTTP_200_OK)
        self.assertEqual(fetched.data["district"], DEFAULT_DISTRICT)

        updated = self.client.put("/api/districts", {"id": pk, "district": UPDATED_DISTRICT}, format="json")
        self.assertEqual(updated.status_code, status.HTTP_200_OK)
        self.assertEqual(District.objects.count(), 1)

        deleted = self.client.delete(f"/api/districts/{pk}")
        self.assertEqual(deleted.status_code, status.HTTP_200_OK)
        self.assertEqual(District.objects.count(), 0)


class DistrictPaginationTests(APITestCase):
    def setUp(self) -> None:
        for name in ["Pune", "Mysore", "Chennai", "Thane", "Ernakulam"]:
            District.objects.create(district=name)

    def test_page_is_ordered_slice_with_headers(self):
        response = self.client.get("/api/districts?page=1&size=2&sort=district,asc")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([d["district"] for d in response.data], ["Mysore", "Pune"])
        self.assertEqual(response["X-Total-Count"], "5")
        self.assertEqual(
            response["Link"],
            '</api/districts?page=2&size=2>; rel="next",'
            '</api/districts?page=0&size=2>; rel="prev",'
            '</api/districts?page=2&size=2>; rel="last",'
            '</api/districts?page=0&size=2>; rel="first"',
        )

    def test_default_order_is_by_id(self):
        response = self.client.get("/api/districts")
        ids = [d["id"] for d in response.data]
        self.assertEqual(ids, sorted(ids))
        self.assertEqual(len(ids), 5)

    def test_page_past_the_end_is_empty(self):
        response = self.client.get("/api/districts?page=9&size=2")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])
        self.assertEqual(response["X-Total-Count"], "5")

    def test_unknown_sort_field_is_rejected(self):
        response = self.client.get("/api/districts?sort=nope,desc")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_bad_paging_parameters_are_rejected(self):
        self.assertEqual(self.client.get("/api/districts?page=-1").status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self.client.get("/api/districts?size=0").status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self.client.get("/api/districts?size=2001").status_code, status.HTTP_400_BAD_REQUEST)

    def test_page_beyond_offset_range_is_rejected(self):
        response = self.client.get("/api/districts?page=100000000000000000&size=2000")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("page", response.data["error"]["message"])
