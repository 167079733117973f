import io

from apps.console.prompter import StdioPrompter
from clinic.access.roles import Role
from clinic.directory import Directory
from clinic.session.app import ClinicApp, SessionState


def _app(script: str) -> tuple[ClinicApp, Directory, io.StringIO]:
    directory = Directory()
    out = io.StringIO()
    app = ClinicApp(directory, StdioPrompter(io.StringIO(script), out))
    return app, directory, out


def test_exit_stops_the_app() -> None:
    app, _, out = _app("2\n")
    assert app.run() == 0
    assert app.state is SessionState.STOPPED
    assert "Exiting. Goodbye." in out.getvalue()


def test_failed_login_returns_to_top_menu() -> None:
    app, _, out = _app("1\nx\ny\n1\nadmin\nwrong\n2\n")
    assert app.run() == 0
    text = out.getvalue()
    assert text.count("Invalid username or password.") == 2
    assert "Login successful" not in text


def test_login_reaches_role_menu_then_logs_out() -> None:
    app, _, out = _app("1\nadmin\nadmin123\n5\n2\n")
    app.run()
    text = out.getvalue()
    assert "Login successful. Welcome, admin (Admin)" in text
    assert "--- Admin Menu ---" in text
    assert "Logged out." in text


def test_login_moves_through_states() -> None:
    app, _, _ = _app("admin\nadmin123\n")
    assert app.state is SessionState.LOGGED_OUT
    session = app.login()
    assert session is not None
    assert session.username == "admin"
    assert session.role is Role.ADMIN
    assert app.state is SessionState.ROLE_MENU


def test_failed_login_state() -> None:
    app, _, _ = _app("nobody\npw\n")
    assert app.login() is None
    assert app.state is SessionState.LOGGED_OUT


def test_top_menu_reprompts_on_bad_choice() -> None:
    app, _, out = _app("9\nabc\n\n2\n")
    app.run()
    text = out.getvalue()
    assert "Enter a number between 1 and 2." in text
    assert "Invalid input. Enter a number." in text


def test_end_of_input_stops_cleanly() -> None:
    app, _, out = _app("1\nadmin\nadmin123\n")
    assert app.run() == 0
    assert app.state is SessionState.STOPPED
    assert "Input closed. Goodbye." in out.getvalue()


def test_admin_creates_nurse_who_registers_patient() -> None:
    script = "\n".join(
        [
            "1", "admin", "admin123",
            "1", "nurse1", "2", "pw",
            "5",
            "1", "nurse1", "pw",
            "1", "Jane", "30", "F", "fever", "2024-01-01",
            "4",
            "2",
        ]
    ) + "\n"
    app, directory, out = _app(script)
    assert app.run() == 0

    assert directory.get_account("nurse1").role is Role.NURSE
    assert directory.find_patient(1).name == "Jane"
    text = out.getvalue()
    assert "Welcome, nurse1 (Nurse)" in text
    assert "Patient registered with ID: 1" in text
