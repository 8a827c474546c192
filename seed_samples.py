"""
Insert the demo portfolio projects and testimonials into an empty database
Usage: python seed_samples.py
"""
from dotenv import load_dotenv

load_dotenv()

from qds.core.database import SessionLocal, init_db  # noqa: E402
from qds.services.seed import seed_default_content, seed_sample_content  # noqa: E402

init_db()
db = SessionLocal()
try:
    print('=== DEFAULT CONTENT ===')
    for table, inserted in seed_default_content(db).items():
        print(f"  {table}: {inserted} inserted")

    print()
    print('=== SAMPLE CONTENT ===')
    for table, inserted in seed_sample_content(db).items():
        print(f"  {table}: {inserted} inserted")
finally:
    db.close()
