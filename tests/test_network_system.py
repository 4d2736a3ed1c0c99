from conftest import errors, output
from member import ConnectionRequest
from network_system import ACCEPT, REJECT, REQUEST, Outcome


def connection_rows(db):
    return db.execute_query_and_return_result(
        "SELECT userId, connectionId, status FROM CONNECTION_USR ORDER BY userId"
    )


# ——— Account ———

def test_create_user_then_log_in(session):
    created = session("alice", "pw1", "alice@example.com", "Alice", "1990/01/01")
    assert created.create_user() == "alice"
    assert "User successfully created!" in output(created)

    assert session("alice", "pw1").log_in() == "alice"


def test_log_in_with_wrong_password_fails(session, add_user):
    add_user("alice", password="pw1")
    system = session("alice", "nope")
    assert system.log_in() is None
    assert "Invalid login or password." in output(system)


def test_create_duplicate_user_prints_error(session, add_user):
    add_user("alice")
    system = session("alice", "pw", "a@example.com", "Alice", "1990/01/01")
    assert system.create_user() is None
    assert "UNIQUE" in errors(system)
    assert "User successfully created!" not in output(system)


def test_arbitrary_text_is_stored_verbatim(session, db):
    name = "O'Brien'); DROP TABLE USR; --"
    session("obrien", "pw", "o@example.com", name, "1990/01/01").create_user()
    rows = db.execute_query_and_return_result("SELECT name FROM USR WHERE userId = %s", ("obrien",))
    assert rows == [[name]]


# ——— Profile updates ———

def test_change_password(session, add_user):
    add_user("alice", password="old")
    system = session("old", "new")
    assert system.change_password("alice") is True
    assert "PASSWORD CHANGED!" in output(system)

    assert session("alice", "new").log_in() == "alice"
    assert session("alice", "old").log_in() is None


def test_change_password_requires_current_password(session, add_user):
    add_user("alice", password="old")
    system = session("wrong", "new")
    assert system.change_password("alice") is False
    assert "Current password is incorrect." in output(system)
    assert session("alice", "old").log_in() == "alice"


def test_update_email(session, db, add_user):
    add_user("alice")
    assert session("alice@new.example").update_email("alice") is True
    rows = db.execute_query_and_return_result("SELECT email FROM USR WHERE userId = %s", ("alice",))
    assert rows == [["alice@new.example"]]


def test_update_education_adds_a_row_each_time(session, db, add_user):
    add_user("alice")
    session("UCR", "CS", "BS", "2010/09/01", "2014/06/01").update_education("alice")
    session("UCR", "CS", "MS", "2014/09/01", "2016/06/01").update_education("alice")
    rows = db.execute_query_and_return_result(
        "SELECT degree FROM EDUCATIONAL_DETAILS WHERE userId = %s ORDER BY degree", ("alice",)
    )
    assert rows == [["BS"], ["MS"]]


def test_update_profile_submenu_adds_work_experience(session, db, add_user):
    add_user("alice")
    system = session("3", "Initech", "Engineer", "Austin", "2015/01/01", "2018/01/01")
    assert system.update_profile("alice") is Outcome.DONE
    assert "WORK EXPERIENCE UPDATED!" in output(system)
    rows = db.execute_query_and_return_result(
        "SELECT company, role, location FROM WORK_EXPR WHERE userId = %s", ("alice",)
    )
    assert rows == [["Initech", "Engineer", "Austin"]]


# ——— Profiles ———

def test_view_profile_without_experience(session, add_user):
    add_user("alice", name="Alice")
    system = session()
    system.view_profile("alice")
    text = output(system)
    assert "NAME: Alice" in text
    assert "No Work Experience" in text
    assert "No Education Experience" in text
    assert "Company:" not in text
    assert "Institution Name:" not in text


def test_view_profile_lists_rows(session, add_user):
    add_user("alice")
    session("Initech", "Engineer", "Austin", "2015/01/01", "2018/01/01").update_work_experience("alice")
    session("UCR", "CS", "BS", "2010/09/01", "2014/06/01").update_education("alice")
    system = session()
    system.view_profile("alice")
    text = output(system)
    assert "Company: Initech" in text
    assert "Institution Name: UCR" in text
    assert "No Work Experience" not in text
    assert "No Education Experience" not in text


def test_find_profile(session, add_user):
    add_user("bob")
    found = session("bob")
    assert found.find_profile("alice") is True
    assert "User found" in output(found)

    missing = session("nobody")
    assert missing.find_profile("alice") is False
    assert "Username not found" in output(missing)


def test_find_profile_details_are_not_implemented(session, add_user):
    add_user("alice")
    add_user("bob")
    system = session("bob")
    system.current_user = "alice"
    assert system.handle_user_choice(6) is Outcome.NOT_IMPLEMENTED

    system = session("nobody")
    system.current_user = "alice"
    assert system.handle_user_choice(6) is Outcome.DONE


def test_messaging_is_not_implemented(session):
    system = session()
    system.current_user = "alice"
    assert system.handle_user_choice(3) is Outcome.NOT_IMPLEMENTED
    assert "not implemented" in output(system)


# ——— Connections ———

def test_send_request_creates_one_request_row(session, db, add_user):
    add_user("alice")
    add_user("bob")
    system = session("bob")
    assert system.send_request("alice") is True
    assert "Your request has been sent to bob" in output(system)
    assert connection_rows(db) == [["alice", "bob", REQUEST]]


def test_accept_request_makes_both_friends(session, db, add_user):
    add_user("alice")
    add_user("bob")
    session("bob").send_request("alice")

    pending = session("1", "1")
    requests = pending.pending_requests("bob")
    assert [r.user_id for r in requests] == ["alice"]
    assert "1. alice" in output(pending)
    assert connection_rows(db) == [["alice", "bob", ACCEPT]]

    assert session("9").list_of_friends("alice") == ["bob"]
    assert session("9").list_of_friends("bob") == ["alice"]


def test_deny_request_keeps_friend_lists_empty(session, db, add_user):
    add_user("alice")
    add_user("bob")
    session("bob").send_request("alice")

    session("2", "1").pending_requests("bob")
    assert connection_rows(db) == [["alice", "bob", REJECT]]

    friends = session()
    assert friends.list_of_friends("alice") == []
    assert "You have no connections at this time" in output(friends)
    assert session().list_of_friends("bob") == []
    assert session().pending_requests("bob") == []


def test_pending_request_out_of_range(session, db, add_user):
    add_user("alice")
    add_user("bob")
    session("bob").send_request("alice")
    system = session("1", "5")
    system.pending_requests("bob")
    assert "Invalid selection!" in output(system)
    assert connection_rows(db) == [["alice", "bob", REQUEST]]


def test_pending_request_non_numeric_selection(session, db, add_user):
    add_user("alice")
    add_user("bob")
    session("bob").send_request("alice")
    system = session("1", "first")
    system.pending_requests("bob")
    assert "Your input is invalid!" in output(system)
    assert connection_rows(db) == [["alice", "bob", REQUEST]]


def test_stale_request_snapshot_is_not_overwritten(session, db, add_user):
    add_user("alice")
    add_user("bob")
    session("bob").send_request("alice")
    snapshot = [ConnectionRequest("alice", "bob", REQUEST)]
    db.execute_update("UPDATE CONNECTION_USR SET status = %s", (ACCEPT,))

    system = session("1")
    assert system._answer_request(snapshot, REJECT, "deny") is False
    assert "That request is no longer pending." in output(system)
    assert connection_rows(db) == [["alice", "bob", ACCEPT]]


def test_friend_list_drills_into_profile(session, add_user):
    add_user("alice")
    add_user("bob", name="Bobby")
    session("bob").send_request("alice")
    session("1", "1").pending_requests("bob")

    system = session("1", "1")
    system.list_of_friends("alice")
    text = output(system)
    assert "1: bob" in text
    assert "USER PROFILE" in text
    assert "NAME: Bobby" in text


# ——— Dispatch ———

def test_unrecognized_choices(session):
    system = session()
    assert system.handle_main_choice(5) is Outcome.DONE
    assert "Unrecognized choice!" in output(system)


def test_log_out_clears_session(session):
    system = session()
    system.current_user = "alice"
    assert system.handle_user_choice(9) is Outcome.LOGGED_OUT
    assert system.current_user is None


def test_run_full_scenario(session, db):
    system = session(
        "1", "alice", "pw1", "alice@example.com", "Alice", "1990/01/01",
        "1", "bob", "pw2", "bob@example.com", "Bob", "1991/02/02",
        "2", "alice", "pw1",
        "4", "bob",
        "9",
        "two",
        "2", "bob", "pw2",
        "7", "1", "1",
        "1", "9",
        "9",
        "9",
    )
    system.run()

    assert system.current_user is None
    assert connection_rows(db) == [["alice", "bob", ACCEPT]]
    text = output(system)
    assert "Your input is invalid!" in text
    assert "1. alice" in text
    assert "1: alice" in text
    assert session("9").list_of_friends("alice") == ["bob"]
    assert session("9").list_of_friends("bob") == ["alice"]


def test_action_after_connection_loss_keeps_menu_running(session, db, add_user):
    add_user("alice")
    db.conn.close()
    system = session("bob")
    assert system.send_request("alice") is False
    assert "closed database" in errors(system)
    assert "Your request has been sent" not in output(system)


def test_statement_failure_is_reported_once(session, add_user):
    add_user("alice")
    system = session("alice", "pw", "a@example.com", "Alice", "1990/01/01")
    system.create_user()
    assert errors(system).count("UNIQUE constraint failed") == 1
