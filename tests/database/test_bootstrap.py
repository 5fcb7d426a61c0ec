from src.dayflow.dayflow.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use


def test_strip_create_db_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS dayflow_hrms;\nUSE dayflow_hrms;\nCREATE TABLE t (id INT);"
    assert _strip_create_db_and_use(sql).strip() == "CREATE TABLE t (id INT);"


def test_split_ignores_semicolons_in_quotes_and_comments():
    sql = """
    -- demo rows; not a statement
    INSERT INTO t VALUES ('a;b');
    INSERT INTO t VALUES ("c;d")
    """
    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
    ]
