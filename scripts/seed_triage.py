import asyncio
import json
import os
import sys

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from er_triage.core.config import settings
from er_triage.core.db import Database
from er_triage.core.errors import TriageError
from er_triage.modules.patients.repository import PatientRepository
from er_triage.modules.patients.service import TriageService

async def main(json_file_path: str):
    """
    Load patients from a JSON array into the triage collection.

    Each entry goes through the same validation as POST /addPatient;
    invalid entries are reported and skipped.
    """
    print(f"Seeding triage list from {json_file_path}...")
    with open(json_file_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    db = Database.from_settings(settings)
    await db.connect()
    added = 0
    try:
        for entry in data:
            async with db.session() as session:
                service = TriageService(PatientRepository(session))
                try:
                    created = await service.add_patient(entry)
                except TriageError as e:
                    print(f"  - Skipping {entry!r}: {e.message}")
                    continue
                print(f"  - Added {entry['name']} ({created.patient_id})")
                added += 1
    finally:
        await db.close()
    print(f"Done: {added} of {len(data)} patients added.")

if __name__ == "__main__":
    default_path = os.path.join(os.path.dirname(__file__), 'sample_patients.json')
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else default_path))
