"""Built-in SQL reference content.

Entries are listed per category in reading order. Examples use ANSI SQL
where possible; dialect-specific syntax is called out in the description.
"""

from sql_cheatsheet.content.models import Category, TopicEntry

DDL_TOPICS = [
    TopicEntry(
        category=Category.DDL,
        title="CREATE TABLE",
        description="Defines a new table with its columns, data types and constraints.",
        example=(
            "CREATE TABLE employees (\n"
            "    id INT PRIMARY KEY,\n"
            "    name VARCHAR(100) NOT NULL,\n"
            "    department_id INT,\n"
            "    hired_on DATE\n"
            ");"
        ),
    ),
    TopicEntry(
        category=Category.DDL,
        title="ALTER TABLE",
        description=(
            "Changes the structure of an existing table: add, drop or modify "
            "columns and constraints, or rename the table."
        ),
        example=(
            "ALTER TABLE employees ADD COLUMN email VARCHAR(255);\n"
            "ALTER TABLE employees DROP COLUMN email;\n"
            "ALTER TABLE employees RENAME TO staff;"
        ),
        keywords=("ADD COLUMN", "DROP COLUMN", "RENAME TABLE"),
    ),
    TopicEntry(
        category=Category.DDL,
        title="DROP TABLE",
        description="Removes a table definition together with all of its data, indexes and privileges.",
        example="DROP TABLE IF EXISTS employees;",
    ),
    TopicEntry(
        category=Category.DDL,
        title="TRUNCATE TABLE",
        description=(
            "Deletes every row of a table while keeping its structure. Faster "
            "than DELETE without a WHERE clause because rows are not logged one by one."
        ),
        example="TRUNCATE TABLE audit_log;",
        keywords=("TRUNCATE",),
    ),
    TopicEntry(
        category=Category.DDL,
        title="CREATE INDEX",
        description=(
            "Builds an index on one or more columns to speed up lookups, joins "
            "and sorting at the cost of slower writes."
        ),
        example=(
            "CREATE INDEX idx_employees_department ON employees (department_id);\n"
            "CREATE UNIQUE INDEX idx_employees_email ON employees (email);"
        ),
        keywords=("INDEX", "DROP INDEX"),
    ),
    TopicEntry(
        category=Category.DDL,
        title="CREATE VIEW",
        description="Stores a named query that can be selected from like a table.",
        example=(
            "CREATE VIEW active_employees AS\n"
            "SELECT id, name FROM employees WHERE terminated_on IS NULL;"
        ),
        keywords=("VIEW",),
    ),
    TopicEntry(
        category=Category.DDL,
        title="CREATE DATABASE",
        description="Creates a new database (schema container). Dropped with DROP DATABASE.",
        example="CREATE DATABASE company;\nDROP DATABASE company;",
        keywords=("DROP DATABASE",),
    ),
]

DML_TOPICS = [
    TopicEntry(
        category=Category.DML,
        title="INSERT",
        description="Adds new rows to a table, either from literal values or from the result of a query.",
        example=(
            "INSERT INTO employees (id, name, department_id)\n"
            "VALUES (1, 'Ada', 10), (2, 'Grace', 20);\n\n"
            "INSERT INTO archive SELECT * FROM employees WHERE hired_on < '2000-01-01';"
        ),
        keywords=("INSERT INTO",),
    ),
    TopicEntry(
        category=Category.DML,
        title="UPDATE",
        description="Modifies column values of existing rows. Without WHERE every row is updated.",
        example="UPDATE employees SET department_id = 30 WHERE id = 2;",
    ),
    TopicEntry(
        category=Category.DML,
        title="DELETE",
        description="Removes rows matching a condition. Without WHERE every row is removed.",
        example="DELETE FROM employees WHERE terminated_on < '2015-01-01';",
        keywords=("DELETE FROM",),
    ),
    TopicEntry(
        category=Category.DML,
        title="MERGE",
        description=(
            "Inserts, updates or deletes rows of a target table depending on "
            "whether they match rows of a source (also known as upsert)."
        ),
        example=(
            "MERGE INTO employees AS t\n"
            "USING new_hires AS s ON t.id = s.id\n"
            "WHEN MATCHED THEN UPDATE SET name = s.name\n"
            "WHEN NOT MATCHED THEN INSERT (id, name) VALUES (s.id, s.name);"
        ),
        keywords=("UPSERT",),
    ),
]

DQL_TOPICS = [
    TopicEntry(
        category=Category.DQL,
        title="SELECT",
        description="Retrieves columns or expressions from one or more tables.",
        example="SELECT id, name FROM employees;\nSELECT * FROM employees;",
        keywords=("SELECT FROM",),
    ),
    TopicEntry(
        category=Category.DQL,
        title="SELECT DISTINCT",
        description="Returns only unique rows, removing duplicates from the result set.",
        example="SELECT DISTINCT department_id FROM employees;",
        keywords=("DISTINCT",),
    ),
    TopicEntry(
        category=Category.DQL,
        title="Subquery",
        description=(
            "A query nested inside another statement, used as a value, a list "
            "for IN, or a derived table in FROM."
        ),
        example=(
            "SELECT name FROM employees\n"
            "WHERE department_id IN (SELECT id FROM departments WHERE region = 'EU');"
        ),
        keywords=("NESTED QUERY", "EXISTS"),
    ),
    TopicEntry(
        category=Category.DQL,
        title="UNION",
        description=(
            "Stacks the results of two queries with compatible columns. UNION "
            "removes duplicates; UNION ALL keeps them."
        ),
        example=(
            "SELECT name FROM employees\n"
            "UNION\n"
            "SELECT name FROM contractors;"
        ),
        keywords=("UNION ALL", "INTERSECT", "EXCEPT"),
    ),
    TopicEntry(
        category=Category.DQL,
        title="WITH",
        description="Common table expression: names a subquery so it can be referenced later in the statement.",
        example=(
            "WITH dept_totals AS (\n"
            "    SELECT department_id, COUNT(*) AS headcount\n"
            "    FROM employees GROUP BY department_id\n"
            ")\n"
            "SELECT * FROM dept_totals WHERE headcount > 10;"
        ),
        keywords=("CTE", "COMMON TABLE EXPRESSION"),
    ),
]

DCL_TOPICS = [
    TopicEntry(
        category=Category.DCL,
        title="GRANT",
        description="Gives a user or role privileges on database objects.",
        example="GRANT SELECT, INSERT ON employees TO analyst;",
    ),
    TopicEntry(
        category=Category.DCL,
        title="REVOKE",
        description="Withdraws previously granted privileges from a user or role.",
        example="REVOKE INSERT ON employees FROM analyst;",
    ),
]

TCL_TOPICS = [
    TopicEntry(
        category=Category.TCL,
        title="BEGIN TRANSACTION",
        description="Starts a transaction so that the following statements succeed or fail as a unit.",
        example="BEGIN TRANSACTION;\nUPDATE accounts SET balance = balance - 100 WHERE id = 1;",
        keywords=("BEGIN", "START TRANSACTION", "TRANSACTION"),
    ),
    TopicEntry(
        category=Category.TCL,
        title="COMMIT",
        description="Makes all changes of the current transaction permanent.",
        example="COMMIT;",
    ),
    TopicEntry(
        category=Category.TCL,
        title="ROLLBACK",
        description="Undoes the changes of the current transaction, or back to a savepoint.",
        example="ROLLBACK;\nROLLBACK TO SAVEPOINT before_bonus;",
    ),
    TopicEntry(
        category=Category.TCL,
        title="SAVEPOINT",
        description="Marks a point inside a transaction that can be rolled back to without aborting it.",
        example="SAVEPOINT before_bonus;",
    ),
]

CLAUSE_TOPICS = [
    TopicEntry(
        category=Category.CLAUSES,
        title="WHERE",
        description="Filters rows before grouping, using comparison and logical operators.",
        example="SELECT * FROM employees WHERE department_id = 10 AND hired_on >= '2020-01-01';",
        keywords=("AND", "OR", "NOT"),
    ),
    TopicEntry(
        category=Category.CLAUSES,
        title="ORDER BY",
        description="Sorts the result set by one or more expressions, ascending (ASC) or descending (DESC).",
        example="SELECT name, hired_on FROM employees ORDER BY hired_on DESC, name;",
        keywords=("ASC", "DESC", "SORT"),
    ),
    TopicEntry(
        category=Category.CLAUSES,
        title="GROUP BY",
        description="Groups rows sharing the same values so aggregate functions are computed per group.",
        example="SELECT department_id, COUNT(*) FROM employees GROUP BY department_id;",
    ),
    TopicEntry(
        category=Category.CLAUSES,
        title="HAVING",
        description="Filters groups after GROUP BY, typically on aggregate values.",
        example=(
            "SELECT department_id, AVG(salary)\n"
            "FROM employees GROUP BY department_id\n"
            "HAVING AVG(salary) > 50000;"
        ),
    ),
    TopicEntry(
        category=Category.CLAUSES,
        title="LIMIT",
        description=(
            "Restricts how many rows are returned, optionally skipping some "
            "with OFFSET. SQL Server uses TOP; the standard form is FETCH FIRST."
        ),
        example=(
            "SELECT * FROM employees ORDER BY id LIMIT 10 OFFSET 20;\n"
            "SELECT * FROM employees ORDER BY id FETCH FIRST 10 ROWS ONLY;"
        ),
        keywords=("OFFSET", "TOP", "FETCH FIRST"),
    ),
    TopicEntry(
        category=Category.CLAUSES,
        title="LIKE",
        description="Matches text against a pattern: % for any sequence, _ for a single character.",
        example="SELECT * FROM employees WHERE name LIKE 'A%';",
        keywords=("WILDCARD",),
    ),
    TopicEntry(
        category=Category.CLAUSES,
        title="IN",
        description="Tests whether a value matches any value in a list or subquery.",
        example="SELECT * FROM employees WHERE department_id IN (10, 20, 30);",
        keywords=("NOT IN",),
    ),
    TopicEntry(
        category=Category.CLAUSES,
        title="BETWEEN",
        description="Tests whether a value lies within an inclusive range.",
        example="SELECT * FROM orders WHERE placed_on BETWEEN '2024-01-01' AND '2024-03-31';",
    ),
    TopicEntry(
        category=Category.CLAUSES,
        title="IS NULL",
        description="Tests for missing values. Comparisons with = NULL never match; use IS NULL or IS NOT NULL.",
        example="SELECT * FROM employees WHERE manager_id IS NULL;",
        keywords=("IS NOT NULL", "NULL"),
    ),
    TopicEntry(
        category=Category.CLAUSES,
        title="CASE",
        description="Conditional expression returning the value of the first matching WHEN branch.",
        example=(
            "SELECT name,\n"
            "       CASE WHEN salary > 100000 THEN 'high'\n"
            "            WHEN salary > 50000 THEN 'medium'\n"
            "            ELSE 'low' END AS band\n"
            "FROM employees;"
        ),
        keywords=("CASE WHEN",),
    ),
    TopicEntry(
        category=Category.CLAUSES,
        title="AS",
        description="Gives a column or table an alias for the duration of the query.",
        example="SELECT e.name AS employee FROM employees AS e;",
        keywords=("ALIAS",),
    ),
]

JOIN_TOPICS = [
    TopicEntry(
        category=Category.JOINS,
        title="JOIN",
        description=(
            "Combines rows from multiple tables based on a related column. "
            "Without a qualifier JOIN means INNER JOIN."
        ),
        example=(
            "SELECT e.name, d.name\n"
            "FROM employees e\n"
            "JOIN departments d ON d.id = e.department_id;"
        ),
        keywords=("JOINS",),
    ),
    TopicEntry(
        category=Category.JOINS,
        title="INNER JOIN",
        description="Returns only the rows that have matching values in both tables.",
        example=(
            "SELECT o.id, c.name\n"
            "FROM orders o\n"
            "INNER JOIN customers c ON c.id = o.customer_id;"
        ),
    ),
    TopicEntry(
        category=Category.JOINS,
        title="LEFT JOIN",
        description=(
            "Returns every row of the left table plus matching rows of the "
            "right table; unmatched right-side columns are NULL."
        ),
        example=(
            "SELECT c.name, o.id\n"
            "FROM customers c\n"
            "LEFT JOIN orders o ON o.customer_id = c.id;"
        ),
        keywords=("LEFT OUTER JOIN",),
    ),
    TopicEntry(
        category=Category.JOINS,
        title="RIGHT JOIN",
        description=(
            "Returns every row of the right table plus matching rows of the "
            "left table; unmatched left-side columns are NULL."
        ),
        example=(
            "SELECT c.name, o.id\n"
            "FROM customers c\n"
            "RIGHT JOIN orders o ON o.customer_id = c.id;"
        ),
        keywords=("RIGHT OUTER JOIN",),
    ),
    TopicEntry(
        category=Category.JOINS,
        title="FULL OUTER JOIN",
        description="Returns all rows of both tables, matching them where possible and filling gaps with NULL.",
        example=(
            "SELECT c.name, o.id\n"
            "FROM customers c\n"
            "FULL OUTER JOIN orders o ON o.customer_id = c.id;"
        ),
        keywords=("FULL JOIN", "OUTER JOIN"),
    ),
    TopicEntry(
        category=Category.JOINS,
        title="CROSS JOIN",
        description="Returns the Cartesian product: every row of the first table paired with every row of the second.",
        example="SELECT s.size, c.color FROM sizes s CROSS JOIN colors c;",
        keywords=("CARTESIAN PRODUCT",),
    ),
    TopicEntry(
        category=Category.JOINS,
        title="SELF JOIN",
        description="Joins a table to itself through aliases, e.g. to relate employees to their managers.",
        example=(
            "SELECT e.name AS employee, m.name AS manager\n"
            "FROM employees e\n"
            "LEFT JOIN employees m ON m.id = e.manager_id;"
        ),
    ),
]

CONSTRAINT_TOPICS = [
    TopicEntry(
        category=Category.CONSTRAINTS,
        title="PRIMARY KEY",
        description="Uniquely identifies each row. Implies NOT NULL and UNIQUE; one per table.",
        example="CREATE TABLE departments (\n    id INT PRIMARY KEY,\n    name VARCHAR(50)\n);",
    ),
    TopicEntry(
        category=Category.CONSTRAINTS,
        title="FOREIGN KEY",
        description="Requires column values to exist in the referenced table, enforcing referential integrity.",
        example=(
            "ALTER TABLE employees\n"
            "ADD CONSTRAINT fk_department\n"
            "FOREIGN KEY (department_id) REFERENCES departments (id) ON DELETE SET NULL;"
        ),
        keywords=("REFERENCES",),
    ),
    TopicEntry(
        category=Category.CONSTRAINTS,
        title="UNIQUE",
        description="Prevents duplicate values in a column or combination of columns.",
        example="ALTER TABLE employees ADD CONSTRAINT uq_email UNIQUE (email);",
    ),
    TopicEntry(
        category=Category.CONSTRAINTS,
        title="NOT NULL",
        description="Requires that a column always holds a value.",
        example="CREATE TABLE tags (label VARCHAR(30) NOT NULL);",
    ),
    TopicEntry(
        category=Category.CONSTRAINTS,
        title="CHECK",
        description="Rejects rows whose values fail a boolean condition.",
        example="ALTER TABLE employees ADD CONSTRAINT chk_salary CHECK (salary >= 0);",
    ),
    TopicEntry(
        category=Category.CONSTRAINTS,
        title="DEFAULT",
        description="Supplies a value for a column when an INSERT does not provide one.",
        example="CREATE TABLE orders (\n    id INT PRIMARY KEY,\n    status VARCHAR(20) DEFAULT 'new'\n);",
    ),
]

DATA_TYPE_TOPICS = [
    TopicEntry(
        category=Category.DATA_TYPES,
        title="INT",
        description="Whole numbers. Variants by range: SMALLINT, INT/INTEGER, BIGINT.",
        example="quantity INT,\nviews BIGINT",
        keywords=("INTEGER", "SMALLINT", "BIGINT"),
    ),
    TopicEntry(
        category=Category.DATA_TYPES,
        title="DECIMAL",
        description="Exact fixed-point numbers with a given precision and scale; use for money.",
        example="price DECIMAL(10, 2)",
        keywords=("NUMERIC",),
    ),
    TopicEntry(
        category=Category.DATA_TYPES,
        title="FLOAT",
        description="Approximate floating-point numbers; not suitable for exact amounts.",
        example="temperature FLOAT,\nratio DOUBLE PRECISION",
        keywords=("REAL", "DOUBLE PRECISION"),
    ),
    TopicEntry(
        category=Category.DATA_TYPES,
        title="CHAR",
        description="Fixed-length text, padded with spaces to the declared length.",
        example="country_code CHAR(2)",
    ),
    TopicEntry(
        category=Category.DATA_TYPES,
        title="VARCHAR",
        description="Variable-length text up to the declared maximum length.",
        example="name VARCHAR(100)",
    ),
    TopicEntry(
        category=Category.DATA_TYPES,
        title="TEXT",
        description="Long variable-length text without a practical length limit (dialect-specific).",
        example="notes TEXT",
        keywords=("CLOB",),
    ),
    TopicEntry(
        category=Category.DATA_TYPES,
        title="DATE",
        description="Calendar date without time of day. TIME stores only the time of day.",
        example="hired_on DATE,\nstarts_at TIME",
        keywords=("TIME",),
    ),
    TopicEntry(
        category=Category.DATA_TYPES,
        title="TIMESTAMP",
        description="Date and time of day, optionally WITH TIME ZONE. MySQL also offers DATETIME.",
        example="created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP",
        keywords=("DATETIME",),
    ),
    TopicEntry(
        category=Category.DATA_TYPES,
        title="BOOLEAN",
        description="TRUE, FALSE or NULL. Some dialects emulate it with TINYINT(1) or BIT.",
        example="is_active BOOLEAN DEFAULT TRUE",
        keywords=("BOOL", "BIT"),
    ),
    TopicEntry(
        category=Category.DATA_TYPES,
        title="BLOB",
        description="Binary large object for raw bytes such as images or files.",
        example="thumbnail BLOB",
        keywords=("BINARY", "BYTEA"),
    ),
]

FUNCTION_TOPICS = [
    TopicEntry(
        category=Category.FUNCTIONS,
        title="COUNT",
        description="Aggregate returning the number of rows, or of non-NULL values of an expression.",
        example="SELECT COUNT(*), COUNT(manager_id) FROM employees;",
    ),
    TopicEntry(
        category=Category.FUNCTIONS,
        title="SUM",
        description="Aggregate returning the total of a numeric column.",
        example="SELECT SUM(amount) FROM orders;",
    ),
    TopicEntry(
        category=Category.FUNCTIONS,
        title="AVG",
        description="Aggregate returning the arithmetic mean of a numeric column, ignoring NULL.",
        example="SELECT AVG(salary) FROM employees;",
    ),
    TopicEntry(
        category=Category.FUNCTIONS,
        title="MIN and MAX",
        description="Aggregates returning the smallest and largest value of an expression.",
        example="SELECT MIN(hired_on), MAX(hired_on) FROM employees;",
        keywords=("MIN", "MAX"),
    ),
    TopicEntry(
        category=Category.FUNCTIONS,
        title="CONCAT",
        description="Joins strings together. Many dialects also support the || operator.",
        example="SELECT CONCAT(first_name, ' ', last_name) FROM employees;",
    ),
    TopicEntry(
        category=Category.FUNCTIONS,
        title="COALESCE",
        description="Returns the first non-NULL argument; handy for default values.",
        example="SELECT COALESCE(nickname, first_name) FROM employees;",
        keywords=("IFNULL", "NVL"),
    ),
    TopicEntry(
        category=Category.FUNCTIONS,
        title="ROW_NUMBER",
        description=(
            "Window function numbering rows within a partition. Window "
            "functions use OVER and keep every row, unlike GROUP BY."
        ),
        example=(
            "SELECT name, department_id,\n"
            "       ROW_NUMBER() OVER (PARTITION BY department_id ORDER BY salary DESC) AS rank_in_dept\n"
            "FROM employees;"
        ),
        keywords=("OVER", "WINDOW FUNCTION", "RANK", "PARTITION BY"),
    ),
]

OPTIMIZATION_TOPICS = [
    TopicEntry(
        category=Category.OPTIMIZATION,
        title="Index Filter and Join Columns",
        description=(
            "Columns used in WHERE, JOIN and ORDER BY benefit most from "
            "indexes. Avoid indexing low-selectivity columns."
        ),
        example="CREATE INDEX idx_orders_customer ON orders (customer_id);",
        keywords=("INDEXING",),
    ),
    TopicEntry(
        category=Category.OPTIMIZATION,
        title="Avoid SELECT *",
        description="Select only the columns you need to reduce I/O and allow index-only scans.",
        example="SELECT id, name FROM employees;  -- instead of SELECT *",
        keywords=("SELECT *",),
    ),
    TopicEntry(
        category=Category.OPTIMIZATION,
        title="EXPLAIN",
        description="Shows the execution plan chosen by the optimizer; use it to spot full scans.",
        example="EXPLAIN SELECT * FROM orders WHERE customer_id = 42;",
        keywords=("EXPLAIN ANALYZE", "QUERY PLAN"),
    ),
    TopicEntry(
        category=Category.OPTIMIZATION,
        title="Sargable Predicates",
        description=(
            "Keep indexed columns bare in conditions. Wrapping them in "
            "functions prevents the optimizer from using the index."
        ),
        example=(
            "-- slow\nSELECT * FROM orders WHERE YEAR(placed_on) = 2024;\n"
            "-- fast\nSELECT * FROM orders WHERE placed_on >= '2024-01-01' AND placed_on < '2025-01-01';"
        ),
        keywords=("SARGABLE",),
    ),
    TopicEntry(
        category=Category.OPTIMIZATION,
        title="EXISTS over IN for Large Subqueries",
        description="EXISTS can stop at the first match, which often beats IN against large subquery results.",
        example=(
            "SELECT c.name FROM customers c\n"
            "WHERE EXISTS (SELECT 1 FROM orders o WHERE o.customer_id = c.id);"
        ),
    ),
    TopicEntry(
        category=Category.OPTIMIZATION,
        title="Batch Writes",
        description="Group many INSERT or UPDATE statements in one transaction or multi-row statement.",
        example="INSERT INTO tags (label) VALUES ('a'), ('b'), ('c');",
        keywords=("BULK INSERT",),
    ),
]

TOPICS: list[TopicEntry] = [
    *DDL_TOPICS,
    *DML_TOPICS,
    *DQL_TOPICS,
    *DCL_TOPICS,
    *TCL_TOPICS,
    *CLAUSE_TOPICS,
    *JOIN_TOPICS,
    *CONSTRAINT_TOPICS,
    *DATA_TYPE_TOPICS,
    *FUNCTION_TOPICS,
    *OPTIMIZATION_TOPICS,
]
