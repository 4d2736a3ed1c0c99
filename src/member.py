class Member:
    """A row of the USR table"""

    def __init__(self, user_id="", password="", email="", name="", date_of_birth=""):
        self.user_id = user_id
        self.password = password              # stored as entered
        self.email = email
        self.name = name
        self.date_of_birth = date_of_birth    # YYYY/MM/DD as typed

    def input_details(self, console):
        """Collect a new user's details from the console"""
        self.user_id = console.prompt("\tEnter user login: ")
        self.password = console.prompt("\tEnter user password: ")
        self.email = console.prompt("\tEnter user email: ")
        self.name = console.prompt("\tEnter full name: ")
        self.date_of_birth = console.prompt("\tEnter date of birth - Year/Month/Date - xxxx/xx/xx: ")

    def get_info(self):
        return {
            'userId': self.user_id,
            'password': self.password,
            'email': self.email,
            'name': self.name,
            'dateOfBirth': self.date_of_birth
        }

    def display(self, console):
        console.show(f"\nNAME: {self.name}")
        console.show(f"Email: {self.email}")
        console.show(f"Date of Birth: {self.date_of_birth}")
        console.show("-" * 34)


class Experience:
    """Base class for dated profile entries"""

    def __init__(self, user_id=""):
        self.user_id = user_id
        self.start_date = ""
        self.end_date = ""

    def input_dates(self, console):
        self.start_date = console.prompt("\tEnter start date (YYYY/MM/DD): ")
        self.end_date = console.prompt("\tEnter end date (YYYY/MM/DD): ")

    def get_dates(self):
        return {
            'startDate': self.start_date,
            'endDate': self.end_date
        }

    def display_dates(self, console):
        console.show(f"Start Date: {self.start_date}")
        console.show(f"End Date: {self.end_date}")


class WorkExperience(Experience):
    """A row of the WORK_EXPR table"""

    def __init__(self, user_id=""):
        super().__init__(user_id)
        self.company = ""
        self.role = ""
        self.location = ""

    @classmethod
    def from_row(cls, user_id, row):
        """Build from (company, role, location, startdate, enddate)"""
        work = cls(user_id)
        work.company, work.role, work.location, work.start_date, work.end_date = row
        return work

    def input_details(self, console):
        self.company = console.prompt("\tEnter company name: ")
        self.role = console.prompt("\tEnter role: ")
        self.location = console.prompt("\tEnter location: ")
        self.input_dates(console)

    def get_info(self):
        info = {
            'userId': self.user_id,
            'company': self.company,
            'role': self.role,
            'location': self.location
        }
        info.update(self.get_dates())
        return info

    def display(self, console):
        console.show(f"\nCompany: {self.company}")
        console.show(f"Role: {self.role}")
        console.show(f"Location: {self.location}")
        self.display_dates(console)


class EducationalDetail(Experience):
    """A row of the EDUCATIONAL_DETAILS table"""

    def __init__(self, user_id=""):
        super().__init__(user_id)
        self.institution = ""
        self.major = ""
        self.degree = ""

    @classmethod
    def from_row(cls, user_id, row):
        """Build from (instituitionName, major, degree, startdate, enddate)"""
        detail = cls(user_id)
        detail.institution, detail.major, detail.degree, detail.start_date, detail.end_date = row
        return detail

    def input_details(self, console):
        self.institution = console.prompt("\tEnter name of College/University: ")
        self.major = console.prompt("\tEnter major: ")
        self.degree = console.prompt("\tEnter Degree: ")
        self.input_dates(console)

    def get_info(self):
        info = {
            'userId': self.user_id,
            'institution': self.institution,
            'major': self.major,
            'degree': self.degree
        }
        info.update(self.get_dates())
        return info

    def display(self, console):
        console.show(f"\nInstitution Name: {self.institution}")
        console.show(f"Major: {self.major}")
        console.show(f"Degree: {self.degree}")
        self.display_dates(console)


class ConnectionRequest:
    """A CONNECTION_USR edge as read at listing time"""

    def __init__(self, user_id, connection_id, status):
        self.user_id = user_id              # sender
        self.connection_id = connection_id  # receiver
        self.status = status

    def __repr__(self):
        return f"ConnectionRequest({self.user_id!r} -> {self.connection_id!r}, {self.status!r})"
