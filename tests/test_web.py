# test_web.py

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from core.domain.models import AppRole, UserRoleRow


async def _login(client, email="coach@example.com", password="pass1234", **extra):
    return await client.post(
        "/auth/login", data={"email": email, "password": password, **extra}, allow_redirects=False,
    )


# === PUBLIC SITE ===

@pytest.mark.asyncio
async def test_landing_page_renders_defaults(client):
    resp = await client.get("/")
    assert resp.status == 200
    html = await resp.text()
    assert "Elite Football" in html
    assert "Kwame Asante" in html
    assert 'data-interval="6000"' in html
    assert "Sign in" in html


@pytest.mark.asyncio
async def test_landing_page_hides_inactive_section(client, repos):
    repos.sections.seed(name="players", section_type="players", title="Our Players", is_active=False, sort_order=3)

    html = await (await client.get("/")).text()
    assert 'id="players"' not in html
    assert 'id="about"' in html


@pytest.mark.asyncio
async def test_unknown_route_renders_404(client):
    resp = await client.get("/no-such-page")
    assert resp.status == 404
    assert "Oops! Page not found" in await resp.text()


@pytest.mark.asyncio
async def test_custom_page(client, repos):
    repos.pages.seed(title="Summer Camp", slug="summer-camp", content="**Register** now", is_published=True)

    resp = await client.get("/pages/summer-camp")
    assert resp.status == 200
    html = await resp.text()
    assert "<strong>Register</strong>" in html

    resp = await client.get("/pages/unknown")
    assert resp.status == 404
    assert "Page not found" in await resp.text()


@pytest.mark.asyncio
async def test_news_disabled_returns_404(client, repos, site_features):
    repos.blog.seed(title="Cup Win", slug="cup-win", is_published=True)
    assert (await client.get("/news/cup-win")).status == 200

    site_features.BLOG_ENABLED = False
    assert (await client.get("/news/cup-win")).status == 404


@pytest.mark.asyncio
async def test_donation_flash(client):
    resp = await client.post("/donate", data={
        "donor_name": "Kofi", "donor_email": "kofi@example.com", "amount": "25", "custom_amount": "50",
    })
    assert resp.status == 200
    assert "Thank you Kofi! Your donation of $50 will make a difference." in await resp.text()

    resp = await client.post("/donate", data={"donor_name": "", "donor_email": "", "amount": ""})
    assert "Please fill in all fields" in await resp.text()


@pytest.mark.asyncio
async def test_flash_shows_once(client):
    await client.post("/donate", data={"donor_name": "Kofi", "donor_email": "kofi@example.com", "amount": "25"})

    html = await (await client.get("/")).text()
    assert "toast-success" not in html


@pytest.mark.asyncio
async def test_contact_form_stores_message(client, repos):
    resp = await client.post("/contact", data={
        "name": "Ama", "email": "ama@example.com", "subject": "Trials", "message": "When are trials?",
    })
    assert "Message sent!" in await resp.text()
    [row] = repos.messages.rows.values()
    assert row["sender_name"] == "Ama"
    assert row["status"] == "new"


@pytest.mark.asyncio
async def test_contact_form_disabled(client, repos, site_features):
    site_features.CONTACT_FORM_ENABLED = False
    resp = await client.post("/contact", data={"name": "Ama", "email": "ama@example.com", "message": "Hi"})
    assert "currently unavailable" in await resp.text()
    assert repos.messages.rows == {}


@pytest.mark.asyncio
async def test_waitlist_rejects_unknown_option(client):
    resp = await client.post("/investment/waitlist", data={"email": "i@example.com", "investment_option": "yacht"})
    assert "Choose one of the investment options" in await resp.text()


# === AUTH ===

@pytest.mark.asyncio
async def test_protected_route_redirects_to_login(client):
    resp = await client.get("/admin-dashboard", allow_redirects=False)
    assert resp.status == 302
    assert resp.headers["Location"] == "/auth?next=%2Fadmin-dashboard"


@pytest.mark.asyncio
async def test_login_sets_cookies_and_redirects_to_dashboard(client, auth_provider, repos, site_settings):
    user = auth_provider.add_user("coach@example.com", "pass1234")
    repos.roles.rows.append(UserRoleRow(user_id=user.id, role=AppRole.ADMIN))

    resp = await _login(client)

    assert resp.status == 302
    assert resp.headers["Location"] == "/admin-dashboard"
    assert resp.cookies[site_settings.access_cookie_name].value in auth_provider.access_tokens
    assert resp.cookies[site_settings.access_cookie_name]["httponly"]

    resp = await client.get("/admin-dashboard")
    assert resp.status == 200
    html = await resp.text()
    assert "Welcome back! Successfully logged in." in html
    assert "Manage roles" in html


@pytest.mark.asyncio
async def test_login_follows_safe_next_only(client, auth_provider):
    auth_provider.add_user("coach@example.com", "pass1234")

    resp = await _login(client, next="/pages/camps")
    assert resp.headers["Location"] == "/pages/camps"

    resp = await _login(client, next="//evil.example.com")
    assert resp.headers["Location"] == "/"

    for target in ("/\t/evil.example.com", "/\n/evil.example.com", "/\\evil.example.com", "https://evil.example.com"):
        resp = await _login(client, next=target)
        assert resp.headers["Location"] == "/"


@pytest.mark.asyncio
async def test_login_failure_shows_message(client, auth_provider):
    auth_provider.add_user("coach@example.com", "pass1234")

    resp = await _login(client, password="wrong")
    assert resp.status == 400
    assert "Invalid email or password. Please try again." in await resp.text()

    resp = await _login(client, password="")
    assert resp.status == 400
    assert "Please enter your email and password." in await resp.text()


@pytest.mark.asyncio
async def test_login_backend_unreachable_shows_message(client, auth_provider):
    auth_provider.sign_in_with_password = AsyncMock(side_effect=ConnectionError("connection refused"))

    resp = await _login(client)

    assert resp.status == 400
    assert "An unexpected error occurred during login" in await resp.text()


@pytest.mark.asyncio
async def test_signup_backend_unreachable_shows_message(client, auth_provider, repos):
    auth_provider.sign_up = AsyncMock(side_effect=ConnectionError("connection refused"))

    resp = await client.post("/auth/signup", data={
        "first_name": "Ama", "last_name": "Mensah", "email": "ama@example.com", "password": "pass1234",
    })

    assert resp.status == 400
    assert "An unexpected error occurred during signup" in await resp.text()
    assert repos.roles.rows == []


@pytest.mark.asyncio
async def test_stale_session_cookies_are_cleared(client, site_settings):
    client.session.cookie_jar.update_cookies({
        site_settings.access_cookie_name: "expired-access",
        site_settings.refresh_cookie_name: "expired-refresh",
    })

    resp = await client.get("/")

    assert resp.status == 200
    assert resp.cookies[site_settings.access_cookie_name].value == ""
    assert resp.cookies[site_settings.refresh_cookie_name].value == ""


@pytest.mark.asyncio
async def test_session_lookup_failure_keeps_cookies(client, sign_in_as, auth_provider, site_settings):
    sign_in_as(AppRole.ADMIN)
    auth_provider.get_user = AsyncMock(side_effect=ConnectionError("connection refused"))

    resp = await client.get("/")
    assert resp.status == 200
    assert site_settings.access_cookie_name not in resp.cookies
    assert site_settings.refresh_cookie_name not in resp.cookies

    resp = await client.get("/admin-dashboard", allow_redirects=False)
    assert resp.headers["Location"] == "/auth?next=%2Fadmin-dashboard"
    assert site_settings.access_cookie_name not in resp.cookies


@pytest.mark.asyncio
async def test_expired_access_token_is_refreshed(client, auth_provider, repos, site_settings):
    user = auth_provider.add_user("coach@example.com", "pass1234")
    repos.roles.rows.append(UserRoleRow(user_id=user.id, role=AppRole.PLAYER))
    resp = await _login(client)
    old_token = resp.cookies[site_settings.access_cookie_name].value
    auth_provider.expire(old_token)

    resp = await client.get("/player-dashboard", allow_redirects=False)

    assert resp.status == 200
    new_token = resp.cookies[site_settings.access_cookie_name].value
    assert new_token != old_token
    assert new_token in auth_provider.access_tokens


@pytest.mark.asyncio
async def test_logout_clears_session(client, auth_provider, site_settings):
    auth_provider.add_user("coach@example.com", "pass1234")
    token = (await _login(client)).cookies[site_settings.access_cookie_name].value

    resp = await client.post("/auth/logout", allow_redirects=False)

    assert resp.status == 302
    assert resp.headers["Location"] == "/"
    assert auth_provider.signed_out == [token]
    assert resp.cookies[site_settings.access_cookie_name].value == ""

    resp = await client.get("/dashboard", allow_redirects=False)
    assert resp.headers["Location"].startswith("/auth?next=")


@pytest.mark.asyncio
async def test_signup_first_user_becomes_admin(client, repos):
    resp = await client.post("/auth/signup", data={
        "first_name": "Ama", "last_name": "Mensah", "email": "ama@example.com", "password": "pass1234",
    })

    assert resp.status == 200
    assert "Account created successfully!" in await resp.text()
    assert [r.role for r in repos.roles.rows] == [AppRole.ADMIN]


@pytest.mark.asyncio
async def test_signup_validation(client, repos, site_features):
    resp = await client.post("/auth/signup", data={
        "first_name": "", "last_name": "Mensah", "email": "bad", "password": "123",
    })
    assert resp.status == 400
    html = await resp.text()
    assert "First name is required" in html
    assert "Enter a valid email address" in html
    assert repos.roles.rows == []

    site_features.SIGNUP_ENABLED = False
    resp = await client.post("/auth/signup", data={"first_name": "A"})
    assert resp.status == 403


# === DASHBOARDS ===

@pytest.mark.asyncio
async def test_wrong_role_is_sent_home(client, sign_in_as):
    sign_in_as(AppRole.PLAYER)

    resp = await client.get("/admin-dashboard", allow_redirects=False)
    assert resp.status == 302
    assert resp.headers["Location"] == "/"

    resp = await client.get("/admin-dashboard")
    assert "You do not have access to that page." in await resp.text()


@pytest.mark.asyncio
@pytest.mark.parametrize("role, path", [
    (AppRole.INVESTOR, "/investor-dashboard"),
    (AppRole.PLAYER, "/player-dashboard"),
    (AppRole.PARTNER, "/partner-dashboard"),
])
async def test_dashboard_redirects_by_role(client, sign_in_as, role, path):
    sign_in_as(role)

    resp = await client.get("/dashboard", allow_redirects=False)
    assert resp.headers["Location"] == path

    resp = await client.get(path)
    assert resp.status == 200
    assert "Coming soon" in await resp.text()


@pytest.mark.asyncio
async def test_dashboard_without_role(client, sign_in_as):
    sign_in_as()
    resp = await client.get("/dashboard", allow_redirects=False)
    assert resp.headers["Location"] == "/"


@pytest.mark.asyncio
async def test_admin_assigns_role(client, sign_in_as, repos):
    sign_in_as(AppRole.ADMIN)
    member = uuid4()

    resp = await client.post("/admin/roles", data={"user_id": str(member), "role": "investor", "action": "assign"})
    assert "Role investor assigned" in await resp.text()
    assert any(r.user_id == member and r.role == AppRole.INVESTOR for r in repos.roles.rows)

    resp = await client.post("/admin/roles", data={"user_id": "not-a-uuid", "role": "investor"})
    assert "Failed to update roles" in await resp.text()


# === CMS ===

@pytest.mark.asyncio
async def test_cms_requires_admin(client, sign_in_as):
    resp = await client.get("/admin/cms", allow_redirects=False)
    assert resp.headers["Location"] == "/auth?next=%2Fadmin%2Fcms"

    sign_in_as(AppRole.PARTNER)
    resp = await client.get("/admin/cms", allow_redirects=False)
    assert resp.headers["Location"] == "/"


@pytest.mark.asyncio
async def test_cms_create_page(client, sign_in_as, repos):
    sign_in_as(AppRole.ADMIN)

    resp = await client.post("/admin/cms/pages", data={"title": "Summer Camp", "is_published": "on"},
                             allow_redirects=False)
    assert resp.status == 302
    assert resp.headers["Location"] == "/admin/cms?tab=pages"
    [row] = repos.pages.rows.values()
    assert row["slug"] == "summer-camp"
    assert row["is_published"] is True

    resp = await client.get("/admin/cms?tab=pages")
    html = await resp.text()
    assert "Page created successfully" in html
    assert "summer-camp" in html

    assert (await client.get("/pages/summer-camp")).status == 200


@pytest.mark.asyncio
async def test_cms_validation_rerenders_form(client, sign_in_as, repos):
    sign_in_as(AppRole.ADMIN)

    resp = await client.post("/admin/cms/pages", data={"title": "  "})
    assert resp.status == 400
    assert "Title is required" in await resp.text()
    assert repos.pages.rows == {}


@pytest.mark.asyncio
async def test_cms_unchecked_box_is_false(client, sign_in_as, repos):
    sign_in_as(AppRole.ADMIN)
    player = repos.players.seed(name="Kwame", is_visible_homepage=True, is_featured=True)

    await client.post(f"/admin/cms/players/{player.id}", data={"name": "Kwame", "goals": "3"})

    row = repos.players.rows[str(player.id)]
    assert row["is_visible_homepage"] is False
    assert row["is_featured"] is False
    assert row["goals"] == 3


@pytest.mark.asyncio
async def test_cms_toggle_faq(client, sign_in_as, repos):
    admin = sign_in_as(AppRole.ADMIN)
    faq = repos.faqs.seed(question="When?", answer="Saturdays", is_active=True)

    resp = await client.post(f"/admin/cms/faqs/{faq.id}/toggle")
    assert "FAQ deactivated" in await resp.text()
    row = repos.faqs.rows[str(faq.id)]
    assert row["is_active"] is False
    assert row["updated_by"] == str(admin.id)


@pytest.mark.asyncio
async def test_cms_sections_cannot_be_created_or_deleted(client, sign_in_as, repos):
    sign_in_as(AppRole.ADMIN)
    section = repos.sections.seed(name="about", title="About")

    assert (await client.post("/admin/cms/sections", data={"title": "X"})).status == 404
    assert (await client.post(f"/admin/cms/sections/{section.id}/delete")).status == 404
    assert (await client.post("/admin/cms/widgets", data={})).status == 404


@pytest.mark.asyncio
async def test_cms_edit_form_prefilled(client, sign_in_as, repos):
    sign_in_as(AppRole.ADMIN)
    post = repos.blog.seed(title="Cup Win", slug="cup-win", excerpt="We won the cup")

    html = await (await client.get(f"/admin/cms?tab=blog&edit={post.id}")).text()
    assert "Edit Post" in html
    assert f'action="/admin/cms/blog/{post.id}"' in html
    assert "We won the cup" in html


@pytest.mark.asyncio
async def test_cms_message_reply(client, sign_in_as, repos):
    sign_in_as(AppRole.ADMIN)
    msg = repos.messages.seed(sender_name="Ama", sender_email="ama@example.com", message="Hi", status="new")

    resp = await client.post(f"/admin/cms/messages/{msg.id}/reply", data={"admin_reply": "Thanks!"})
    assert "Reply saved" in await resp.text()
    assert repos.messages.rows[str(msg.id)]["status"] == "replied"

    resp = await client.post(f"/admin/cms/messages/{msg.id}/reply", data={"admin_reply": ""})
    assert "Reply cannot be empty" in await resp.text()


@pytest.mark.asyncio
async def test_editor_format_and_preview(client, sign_in_as):
    sign_in_as(AppRole.ADMIN)

    resp = await client.post("/admin/cms/format", json={"text": "hello", "start": 0, "end": 5, "format": "bold"})
    assert resp.status == 200
    assert await resp.json() == {"text": "**hello**", "start": 2, "end": 7}

    resp = await client.post("/admin/cms/format", json={"text": "hello", "format": "strike"})
    assert resp.status == 400
    assert "error" in await resp.json()

    resp = await client.post("/admin/cms/preview", json={"text": "**hi** <b>x</b>"})
    assert await resp.text() == "<strong>hi</strong> &lt;b&gt;x&lt;/b&gt;"


@pytest.mark.asyncio
async def test_backend_failure_renders_error_page(client, sign_in_as, services):
    sign_in_as(AppRole.ADMIN)

    async def broken():
        raise RuntimeError("db down")

    services.dashboard.admin_stats = broken
    resp = await client.get("/admin-dashboard")
    assert resp.status == 500
    assert "Something went wrong" in await resp.text()
