"""Create the tables and load the demo task list into an empty database."""
from todo_api.database import create_tables, get_session, seed_tasks
from todo_api.services.tasks import utcnow

# Create tables if not exist
create_tables()

with get_session() as session:
    inserted = seed_tasks(session, utcnow())

if inserted:
    print(f"Seeded {inserted} sample tasks")
else:
    print("Tasks already exist, nothing to seed")
