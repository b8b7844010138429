from unfold_india.core.session_context import Principal, SessionContext
from unfold_india.services.route_guard import LOGIN_PATH, RouteGuard

PRINCIPAL = Principal(id="a3b1c2d4-0000-4000-8000-000000000001", email="ravi@example.com")


def test_public_paths_always_render():
    guard = RouteGuard(SessionContext())
    assert guard.decide("/").outcome == "render"
    assert guard.decide("/login").outcome == "render"


def test_protected_path_waits_while_session_unknown():
    guard = RouteGuard(SessionContext())
    assert guard.decide("/my-chats").outcome == "wait"


def test_protected_path_redirects_when_signed_out():
    context = SessionContext()
    context.resolve(None)
    decision = RouteGuard(context).decide("/my-profile/")
    assert decision.outcome == "redirect"
    assert decision.redirect_to == LOGIN_PATH


def test_protected_path_renders_when_authenticated():
    context = SessionContext()
    context.resolve(PRINCIPAL)
    assert RouteGuard(context).decide("/chatbot").outcome == "render"


def test_watch_redirects_open_view_on_sign_out():
    context = SessionContext()
    context.resolve(PRINCIPAL)
    redirects = []
    RouteGuard(context).watch("/translator", redirects.append)

    context.sign_out()

    assert redirects == [LOGIN_PATH]


def test_watch_after_unmount_is_noop():
    context = SessionContext()
    context.resolve(PRINCIPAL)
    redirects = []
    unmount = RouteGuard(context).watch("/routes", redirects.append)

    unmount()
    context.expire()

    assert redirects == []


def test_watch_ignores_public_views():
    context = SessionContext()
    context.resolve(PRINCIPAL)
    redirects = []
    RouteGuard(context).watch("/", redirects.append)

    context.sign_out()

    assert redirects == []
