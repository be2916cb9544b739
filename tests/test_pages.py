"""HTML view tests: directory, creation form, detail/edit page."""
from app.web.api_client import ApiError


class TestDirectoryPage:

    def test_empty_state(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "No vendors added yet." in response.text
        assert 'id="stat-total">0<' in response.text

    def test_rows_and_counts(self, client, make_vendor):
        make_vendor(name="Rated", status="APPROVED", rating=3, city="Pune", country="India")
        make_vendor(name="Unrated")

        response = client.get("/")
        assert response.status_code == 200
        html = response.text
        assert 'id="stat-total">2<' in html
        assert 'id="stat-approved">1<' in html
        assert 'id="stat-pending">1<' in html
        assert "★★★☆☆" in html
        assert "Not rated" in html
        assert "Pune, India" in html
        assert html.index("Unrated") < html.index("Rated</a>")

    def test_vendors_path_redirects_home(self, client):
        response = client.get("/vendors", follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/"

    def test_fetch_failure_shows_inline_message(self, page_client, fake_api):
        fake_api.fail_with = ApiError("Could not reach the vendor service. Please try again.")
        response = page_client.get("/")
        assert response.status_code == 200
        assert "Could not reach the vendor service" in response.text


class TestCreatePage:

    def test_form_renders_sections(self, client):
        response = client.get("/vendors/new")
        assert response.status_code == 200
        for section in ("Basic Info", "Location", "Capabilities", "Evaluation"):
            assert section in response.text

    def test_submit_creates_and_redirects(self, client):
        response = client.post(
            "/vendors/new",
            data={
                "name": "  Acme  ",
                "domain": "Cloud",
                "email": "a@acme.com",
                "city": "",
                "experienceYears": "4",
                "rating": "",
            },
            follow_redirects=False,
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/"

        vendors = client.get("/api/vendors").json()
        assert len(vendors) == 1
        assert vendors[0]["name"] == "Acme"
        assert vendors[0]["city"] is None
        assert vendors[0]["experienceYears"] == 4
        assert vendors[0]["status"] == "PENDING"
        assert vendors[0]["rating"] is None

    def test_blank_mandatory_field_never_calls_api(self, page_client, fake_api):
        response = page_client.post(
            "/vendors/new", data={"name": "Acme", "domain": "", "email": "a@acme.com"}
        )
        assert response.status_code == 200
        assert "Name, Domain and Email are mandatory." in response.text
        assert fake_api.calls == []
        # submitted values are kept in the form
        assert 'value="Acme"' in response.text

    def test_server_error_text_shown(self, page_client, fake_api):
        fake_api.fail_with = ApiError("email: may not be blank", 422)
        response = page_client.post(
            "/vendors/new", data={"name": "Acme", "domain": "Cloud", "email": "a@acme.com"}
        )
        assert response.status_code == 200
        assert "email: may not be blank" in response.text
        assert len(fake_api.calls_named("create")) == 1


class TestDetailPage:

    def test_shows_record(self, page_client):
        response = page_client.get("/vendors/v-1")
        assert response.status_code == 200
        html = response.text
        assert "Brio Technologies" in html
        assert "Pending Evaluation" in html
        assert "Pune, India" in html
        assert "★★★☆☆" in html
        assert 'href="https://brio.example"' in html

    def test_unknown_vendor(self, page_client):
        response = page_client.get("/vendors/missing")
        assert response.status_code == 200
        assert "not found" in response.text

    def test_save_merges_status_and_rating_without_notes(self, page_client, fake_api, sample_vendor):
        response = page_client.post(
            "/vendors/v-1",
            data={"status": "APPROVED", "rating": "5", "notes": "Strong SOC team"},
        )
        assert response.status_code == 200

        [(_, vendor_id, payload)] = fake_api.calls_named("update")
        assert vendor_id == "v-1"
        assert payload == {**sample_vendor, "status": "APPROVED", "rating": 5}
        assert "notes" not in payload

        html = response.text
        assert "Changes saved." in html
        assert "Approved Vendor" in html
        # notes stay in the page only
        assert "Strong SOC team" in html

    def test_blank_rating_clears_it(self, page_client, fake_api):
        page_client.post("/vendors/v-1", data={"status": "PENDING", "rating": ""})
        [(_, _, payload)] = fake_api.calls_named("update")
        assert payload["rating"] is None

    def test_invalid_rating_blocks_save(self, page_client, fake_api):
        response = page_client.post("/vendors/v-1", data={"status": "PENDING", "rating": "7"})
        assert "Rating must be between 1 and 5." in response.text
        assert fake_api.calls_named("update") == []

    def test_save_failure_is_inline(self, page_client, fake_api):
        fake_api.fail_with = ApiError("Failed to update vendor", 500)
        response = page_client.post("/vendors/v-1", data={"status": "APPROVED", "rating": "2"})
        assert response.status_code == 200
        assert "Failed to update vendor" in response.text

    def test_delete_asks_for_confirmation_first(self, page_client, fake_api):
        response = page_client.post("/vendors/v-1/delete", data={"notes": "keep me"})
        assert response.status_code == 200
        assert "Are you sure you want to delete this vendor?" in response.text
        assert fake_api.calls_named("delete") == []

    def test_confirmed_delete_redirects_home(self, page_client, fake_api):
        response = page_client.post(
            "/vendors/v-1/delete", data={"confirm": "yes"}, follow_redirects=False
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/"
        assert fake_api.calls_named("delete") == [("delete", "v-1")]


class TestPagesAgainstRealApi:
    """Pages calling the JSON API in-process, backed by the test database."""

    def test_save_then_read(self, client, make_vendor):
        vendor = make_vendor()
        response = client.post(
            f"/vendors/{vendor['id']}", data={"status": "APPROVED", "rating": "3", "notes": "n"}
        )
        assert response.status_code == 200
        assert "★★★☆☆" in response.text

        stored = client.get(f"/api/vendors/{vendor['id']}").json()
        assert stored["status"] == "APPROVED"
        assert stored["rating"] == 3
        assert stored["name"] == vendor["name"]

    def test_delete_flow(self, client, make_vendor):
        vendor = make_vendor()
        response = client.post(
            f"/vendors/{vendor['id']}/delete", data={"confirm": "yes"}, follow_redirects=False
        )
        assert response.status_code == 303
        assert client.get(f"/api/vendors/{vendor['id']}").status_code == 404
