from enum import Enum

from database import StatementError
from member import Member, WorkExperience, EducationalDetail, ConnectionRequest

REQUEST = "Request"
ACCEPT = "Accept"
REJECT = "Reject"


class Outcome(Enum):
    """What a menu choice led to"""
    DONE = "done"
    NOT_IMPLEMENTED = "not implemented"
    LOGGED_OUT = "logged out"
    EXIT = "exit"


class NetworkSystem:
    """Menu actions of the professional network client"""

    def __init__(self, db, console):
        """Wire the actions to a database session and a console"""
        self.db = db
        self.console = console
        self.current_user = None  # login of the authenticated user

    def run(self):
        """Alternate between the main menu and the user menu until Exit"""
        while True:
            if self.current_user is None:
                self.display_menu()
                if self.handle_main_choice(self.console.read_choice()) is Outcome.EXIT:
                    return
            else:
                self.display_user_menu()
                self.handle_user_choice(self.console.read_choice())

    def display_menu(self):
        self.console.show("MAIN MENU")
        self.console.show("---------")
        self.console.show("1. Create user")
        self.console.show("2. Log in")
        self.console.show("9. < EXIT")

    def display_user_menu(self):
        self.console.show("MAIN MENU")
        self.console.show("---------")
        self.console.show("1. Goto Friend List")
        self.console.show("2. Update Profile")
        self.console.show("3. Write a new message")
        self.console.show("4. Send Friend Request")
        self.console.show("5. View Profile")
        self.console.show("6. Find Profile")
        self.console.show("7. View Friend Requests")
        self.console.show(".........................")
        self.console.show("9. Log out")

    def handle_main_choice(self, choice):
        if choice == 1:
            self.create_user()
        elif choice == 2:
            self.current_user = self.log_in()
        elif choice == 9:
            return Outcome.EXIT
        else:
            self.console.show("Unrecognized choice!")
        return Outcome.DONE

    def handle_user_choice(self, choice):
        user = self.current_user
        if choice == 1:
            self.list_of_friends(user)
        elif choice == 2:
            return self.update_profile(user)
        elif choice == 3:
            return self.not_implemented("Messaging")
        elif choice == 4:
            self.send_request(user)
        elif choice == 5:
            self.view_profile(user)
        elif choice == 6:
            if self.find_profile(user):
                return self.not_implemented("Profile details")
        elif choice == 7:
            self.pending_requests(user)
        elif choice == 9:
            self.current_user = None
            return Outcome.LOGGED_OUT
        else:
            self.console.show("Unrecognized choice!")
        return Outcome.DONE

    def not_implemented(self, feature):
        self.console.show(f"\t{feature} is not implemented yet.")
        return Outcome.NOT_IMPLEMENTED

    # ——— Account ———
    def create_user(self):
        """Insert a new USR row; uniqueness is left to the schema"""
        member = Member()
        member.input_details(self.console)
        data = member.get_info()
        query = """
        INSERT INTO USR (userId, password, email, name, dateOfBirth)
        VALUES (%s, %s, %s, %s, %s)
        """
        try:
            self.db.execute_update(query, tuple(data.values()))
        except StatementError as e:
            self.console.error(str(e))
            return None
        self.console.show("User successfully created!")
        return member.user_id

    def log_in(self):
        """Return the login when the credentials match a row, else None"""
        login = self.console.prompt("\tEnter user login: ")
        password = self.console.prompt("\tEnter user password: ")
        try:
            found = self.db.execute_query(
                "SELECT * FROM USR WHERE userId = %s AND password = %s", (login, password)
            )
        except StatementError as e:
            self.console.error(str(e))
            return None
        if found > 0:
            return login
        self.console.show("Invalid login or password.")
        return None

    # ——— Profile updates ———
    def update_profile(self, user):
        self.console.show("UPDATE PROFILE")
        self.console.show("---------")
        self.console.show("1. Change Password")
        self.console.show("2. Update Educational Details")
        self.console.show("3. Update Work Experience")
        self.console.show("4. Update Email")
        self.console.show("9. Return to Main Menu")

        choice = self.console.read_choice()
        if choice == 1:
            self.change_password(user)
        elif choice == 2:
            self.update_education(user)
        elif choice == 3:
            self.update_work_experience(user)
        elif choice == 4:
            self.update_email(user)
        elif choice != 9:
            self.console.show("Unrecognized choice!")
        return Outcome.DONE

    def change_password(self, user):
        self.console.show("\tCHANGE PASSWORD")
        self.console.show("---------")
        old_password = self.console.prompt("\tEnter current password: ")
        new_password = self.console.prompt("\tEnter new password: ")
        try:
            matches = self.db.execute_query(
                "SELECT * FROM USR WHERE userId = %s AND password = %s", (user, old_password)
            )
            if not matches:
                self.console.show("\tCurrent password is incorrect.")
                return False
            self.db.execute_update(
                "UPDATE USR SET password = %s WHERE userId = %s", (new_password, user)
            )
        except StatementError as e:
            self.console.error(str(e))
            return False
        self.console.show("\tPASSWORD CHANGED! ")
        return True

    def update_education(self, user):
        """Add one EDUCATIONAL_DETAILS row; existing rows are left alone"""
        self.console.show("\tUPDATE EDUCATION")
        self.console.show("---------")
        detail = EducationalDetail(user)
        detail.input_details(self.console)
        query = """
        INSERT INTO EDUCATIONAL_DETAILS (userId, instituitionName, major, degree, startdate, enddate)
        VALUES (%s, %s, %s, %s, %s, %s)
        """
        try:
            self.db.execute_update(query, tuple(detail.get_info().values()))
        except StatementError as e:
            self.console.error(str(e))
            return False
        self.console.show("\tEDUCATION UPDATED! ")
        return True

    def update_work_experience(self, user):
        """Add one WORK_EXPR row"""
        self.console.show("\tUPDATE WORK EXPERIENCE")
        self.console.show("---------")
        work = WorkExperience(user)
        work.input_details(self.console)
        query = """
        INSERT INTO WORK_EXPR (userId, company, role, location, startDate, endDate)
        VALUES (%s, %s, %s, %s, %s, %s)
        """
        try:
            self.db.execute_update(query, tuple(work.get_info().values()))
        except StatementError as e:
            self.console.error(str(e))
            return False
        self.console.show("\tWORK EXPERIENCE UPDATED! ")
        return True

    def update_email(self, user):
        self.console.show("\tUPDATE EMAIL")
        self.console.show("---------")
        email = self.console.prompt("\tEnter new email: ")
        try:
            self.db.execute_update("UPDATE USR SET email = %s WHERE userId = %s", (email, user))
        except StatementError as e:
            self.console.error(str(e))
            return False
        self.console.show("\tEMAIL UPDATED! ")
        return True

    # ——— Connections ———
    def list_of_friends(self, user):
        """Print accepted connections in both directions and offer to open one.
        Returns the listed friend ids."""
        self.console.show("\tLIST OF FRIENDS")
        self.console.show("---------")
        query = """
        SELECT connectionId AS userId FROM CONNECTION_USR WHERE userId = %s AND status = %s
        UNION ALL
        SELECT userId FROM CONNECTION_USR WHERE connectionId = %s AND status = %s
        """
        try:
            rows = self.db.execute_query_and_return_result(query, (user, ACCEPT, user, ACCEPT))
        except StatementError as e:
            self.console.error(str(e))
            return []

        friends = [row[0] for row in rows]
        if not friends:
            self.console.show("You have no connections at this time\n")
            return friends

        self.console.show("\nList of Friends/Connections: ")
        for num, friend in enumerate(friends, start=1):
            self.console.show(f"{num}: {friend}")

        self.console.show("\t1. View a profile")
        self.console.show("\t9. Go to main menu\n")
        choice = self.console.read_choice()
        if choice == 1:
            friend = self._pick(friends, "Please enter the number of the connection you wish to view: ")
            if friend is not None:
                self.view_profile(friend)
        elif choice != 9:
            self.console.show("Try again")
        return friends

    def send_request(self, user):
        """Insert a Request edge from the user to whatever id is typed"""
        target = self.console.prompt("Enter the userid of the person to connect with: ")
        try:
            self.db.execute_update(
                "INSERT INTO CONNECTION_USR (userId, connectionId, status) VALUES (%s, %s, %s)",
                (user, target, REQUEST)
            )
        except StatementError as e:
            self.console.error(str(e))
            return False
        self.console.show(f"Your request has been sent to {target}")
        return True

    def pending_requests(self, user):
        """List requests addressed to the user and accept or deny one of them"""
        query = """
        SELECT userId, connectionId, status FROM CONNECTION_USR
        WHERE connectionId = %s AND status = %s
        """
        try:
            rows = self.db.execute_query_and_return_result(query, (user, REQUEST))
        except StatementError as e:
            self.console.error(str(e))
            return []

        requests = [ConnectionRequest(*row) for row in rows]
        if not requests:
            self.console.show("You have no connection requests.")
            return requests

        self.console.show("Connection Requests: ")
        for num, request in enumerate(requests, start=1):
            self.console.show(f"{num}. {request.user_id}")
        self.console.show("\n\n---------")
        self.console.show("1. Accept Request")
        self.console.show("2. Deny Request")

        choice = self.console.read_choice()
        if choice == 1:
            self._answer_request(requests, ACCEPT, "accept")
        elif choice == 2:
            self._answer_request(requests, REJECT, "deny")
        else:
            self.console.show("Unrecognized choice!")
        return requests

    def _answer_request(self, requests, status, verb):
        request = self._pick(requests, f"Please enter the number of the connection to {verb}: ")
        if request is None:
            return False
        query = """
        UPDATE CONNECTION_USR SET status = %s
        WHERE userId = %s AND connectionId = %s AND status = %s
        """
        try:
            changed = self.db.execute_update(
                query, (status, request.user_id, request.connection_id, REQUEST)
            )
        except StatementError as e:
            self.console.error(str(e))
            return False
        if changed == 0:
            self.console.show("That request is no longer pending.")
            return False
        request.status = status
        self.console.show(f"Request from {request.user_id}: {status}")
        return True

    def _pick(self, items, text):
        """Read a 1-based position into items; None when unusable"""
        try:
            index = self.console.read_number(text) - 1
        except ValueError:
            self.console.show("Your input is invalid!")
            return None
        if not 0 <= index < len(items):
            self.console.show("Invalid selection!")
            return None
        return items[index]

    # ——— Profiles ———
    def find_profile(self, user):
        """Report whether a user id exists"""
        self.console.show("\tFIND A PROFILE")
        self.console.show("---------")
        username = self.console.prompt("\tPlease enter User ID: ")
        try:
            found = self.db.execute_query("SELECT * FROM USR WHERE userId = %s", (username,))
        except StatementError as e:
            self.console.error(str(e))
            return False
        if found == 0:
            self.console.show("\tUsername not found ")
            return False
        self.console.show("\tUser found ")
        return True

    def view_profile(self, user):
        """Print personal info, work experience and education of a user"""
        self.console.banner("\n\n-----------USER PROFILE-----------")
        try:
            rows = self.db.execute_query_and_return_result(
                "SELECT email, name, dateOfBirth FROM USR WHERE userId = %s", (user,)
            )
            if rows:
                email, name, date_of_birth = rows[0]
                Member(user, email=email, name=name, date_of_birth=date_of_birth).display(self.console)
            else:
                self.console.warn(f"\nNo profile found for {user}")
        except StatementError as e:
            self.console.error(str(e))

        try:
            rows = self.db.execute_query_and_return_result(
                "SELECT company, role, location, startDate, endDate FROM WORK_EXPR WHERE userId = %s",
                (user,)
            )
            self.console.banner("\n----------WORK EXPERIENCE---------\n")
            if not rows:
                self.console.warn("\nNo Work Experience")
            for row in rows:
                WorkExperience.from_row(user, row).display(self.console)
            self.console.show("-" * 34)
        except StatementError as e:
            self.console.error(str(e))

        try:
            rows = self.db.execute_query_and_return_result(
                "SELECT instituitionName, major, degree, startdate, enddate "
                "FROM EDUCATIONAL_DETAILS WHERE userId = %s",
                (user,)
            )
            self.console.banner("\n-------EDUCATION EXPERIENCE-------")
            if not rows:
                self.console.warn("\nNo Education Experience\n")
            for row in rows:
                EducationalDetail.from_row(user, row).display(self.console)
            self.console.show("-" * 34)
        except StatementError as e:
            self.console.error(str(e))
