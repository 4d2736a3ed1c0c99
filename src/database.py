import sys

import psycopg2


class DatabaseConnectionError(Exception):
    """Raised when the startup connection cannot be made."""


class StatementError(Exception):
    """Raised when a statement fails on the database side."""


class Database:
    """Owns the single connection to the ProfNetwork database"""

    def __init__(self, conn, paramstyle="format", error_class=psycopg2.Error, out=None):
        self.conn = conn
        self.paramstyle = paramstyle
        self.error_class = error_class  # driver's base exception
        self.out = out if out is not None else sys.stdout
        self._closed = False

    @classmethod
    def open(cls, host, port, name, user, password, out=None):
        out = out if out is not None else sys.stdout
        url = f"postgresql://{host}:{port}/{name}"
        print(f"[DB] Connecting to: {url}", file=out)
        try:
            conn = psycopg2.connect(
                host=host, port=port, dbname=name, user=user, password=password
            )
        except psycopg2.Error as e:
            raise DatabaseConnectionError(str(e).strip()) from e
        conn.autocommit = True  # every statement stands alone
        print("[DB] Done", file=out)
        return cls(conn, paramstyle=psycopg2.paramstyle, out=out)

    def create_tables(self):
        create_usr = """
        CREATE TABLE IF NOT EXISTS USR (
            userId VARCHAR(50) NOT NULL,
            password VARCHAR(50) NOT NULL,
            email TEXT NOT NULL,
            name VARCHAR(50),
            dateOfBirth DATE,
            PRIMARY KEY (userId)
        )
        """
        self.execute_update(create_usr)

        create_connections = """
        CREATE TABLE IF NOT EXISTS CONNECTION_USR (
            userId VARCHAR(50) NOT NULL,
            connectionId VARCHAR(50) NOT NULL,
            status VARCHAR(30) NOT NULL,
            PRIMARY KEY (userId, connectionId),
            FOREIGN KEY (userId) REFERENCES USR (userId),
            FOREIGN KEY (connectionId) REFERENCES USR (userId)
        )
        """
        self.execute_update(create_connections)

        create_work = """
        CREATE TABLE IF NOT EXISTS WORK_EXPR (
            userId VARCHAR(50) NOT NULL,
            company VARCHAR(50) NOT NULL,
            role VARCHAR(50) NOT NULL,
            location VARCHAR(50),
            startDate DATE,
            endDate DATE,
            FOREIGN KEY (userId) REFERENCES USR (userId)
        )
        """
        self.execute_update(create_work)

        create_education = """
        CREATE TABLE IF NOT EXISTS EDUCATIONAL_DETAILS (
            userId VARCHAR(50) NOT NULL,
            instituitionName VARCHAR(80) NOT NULL,
            major VARCHAR(50) NOT NULL,
            degree VARCHAR(50) NOT NULL,
            startdate DATE,
            enddate DATE,
            FOREIGN KEY (userId) REFERENCES USR (userId)
        )
        """
        self.execute_update(create_education)
        print("[DB] Schema ready", file=self.out)

    def _prepare(self, sql):
        if self.paramstyle == "qmark":
            return sql.replace("%s", "?")
        return sql

    def _execute(self, sql, params):
        cursor = None
        try:
            cursor = self.conn.cursor()
            if params is None:
                cursor.execute(sql)  # raw text, no placeholder handling
            else:
                cursor.execute(self._prepare(sql), tuple(params))
        except self.error_class as e:
            if cursor is not None:
                cursor.close()
            raise StatementError(str(e).strip()) from e
        return cursor

    # ——— Updates ———
    def execute_update(self, sql, params=None):
        """Run an INSERT/UPDATE/DELETE/DDL statement; returns the affected row count"""
        cursor = self._execute(sql, params)
        try:
            self.conn.commit()
            return cursor.rowcount
        finally:
            cursor.close()

    # ——— Queries ———
    def execute_query_and_print(self, sql, params=None):
        """
        Print the header and every row as tab-terminated cells.
        Returns the number of rows printed.
        """
        cursor = self._execute(sql, params)
        try:
            columns = [col[0] for col in cursor.description]
            row_count = 0
            for row in cursor.fetchall():
                if row_count == 0:
                    print("".join(f"{name}\t" for name in columns), file=self.out)
                print("".join(f"{_as_text(value, 'null')}\t" for value in row), file=self.out)
                row_count += 1
            return row_count
        finally:
            cursor.close()

    def execute_query_and_return_result(self, sql, params=None):
        cursor = self._execute(sql, params)
        try:
            return [[_as_text(value) for value in row] for row in cursor.fetchall()]
        finally:
            cursor.close()

    def execute_query(self, sql, params=None):
        """Existence check: 1 if the query yields any row, else 0"""
        cursor = self._execute(sql, params)
        try:
            return 1 if cursor.fetchone() is not None else 0
        finally:
            cursor.close()

    def get_curr_seq_val(self, sequence):
        cursor = self._execute("SELECT currval(%s)", (sequence,))
        try:
            row = cursor.fetchone()
            if row is None:
                return -1
            return int(row[0])
        finally:
            cursor.close()

    def close(self):
        if self._closed:
            return
        self._closed = True
        try:
            self.conn.close()
        except Exception:
            pass


def _as_text(value, null=None):
    if value is None:
        return null
    return str(value)
