import unittest
from datetime import datetime, timedelta, timezone

from api_test_case import ApiTestCase
from config import db
from models.report_model import MissingAnimal, MissingPerson
from models.user_model import User
from schemas.fields import to_naive_utc
from services.exceptions import Forbidden, NoFieldsProvided, ResourceNotFound
from services.ownership_service import OwnershipService
from services.patch_service import PatchService


class PatchAndOwnershipTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.register("alice")
        self.register("bob")
        self.report_id = self.create_animal_report("uid-alice")
        self.ctx = self.app.app_context()
        self.ctx.push()
        self.addCleanup(self.ctx.pop)
        self.alice = db.session.query(User).filter_by(nickname="alice").one()
        self.bob = db.session.query(User).filter_by(nickname="bob").one()

    def test_patch_writes_only_allowed_fields(self):
        applied = PatchService.apply(MissingAnimal, self.report_id,
                                     {"age": 0, "owner_id": self.bob.id, "id": 42})
        self.assertEqual(applied, {"age": 0})
        report = db.session.get(MissingAnimal, self.report_id)
        db.session.refresh(report)
        self.assertEqual(report.age, 0)
        self.assertEqual(report.owner_id, self.alice.id)

    def test_patch_with_nothing_allowed_raises(self):
        with self.assertRaises(NoFieldsProvided):
            PatchService.apply(MissingAnimal, self.report_id, {"owner_id": 1})

    def test_patch_missing_row_raises_not_found(self):
        with self.assertRaises(ResourceNotFound):
            PatchService.apply(MissingAnimal, 999, {"status": "found"})

    def test_patch_accepts_datetimes(self):
        seen = datetime(2024, 6, 1, 7, 15)
        PatchService.apply(MissingAnimal, self.report_id, {"last_seen_at": seen})
        report = db.session.get(MissingAnimal, self.report_id)
        db.session.refresh(report)
        self.assertEqual(report.last_seen_at, seen)

    def test_ownership(self):
        OwnershipService.check(MissingAnimal, self.report_id, self.alice)
        with self.assertRaises(Forbidden):
            OwnershipService.check(MissingAnimal, self.report_id, self.bob)
        with self.assertRaises(ResourceNotFound):
            OwnershipService.check(MissingAnimal, 999, self.alice)
        # same id, other table
        with self.assertRaises(ResourceNotFound):
            OwnershipService.check(MissingPerson, self.report_id, self.alice)

    def test_created_at_is_naive_utc(self):
        report = db.session.get(MissingAnimal, self.report_id)
        self.assertIsNone(report.created_at.tzinfo)
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        self.assertLess(abs(now - report.created_at), timedelta(minutes=1))


class UtcFieldTests(unittest.TestCase):
    def test_offset_is_folded_into_utc(self):
        seoul = datetime(2024, 5, 3, 10, 0, tzinfo=timezone(timedelta(hours=9)))
        self.assertEqual(to_naive_utc(seoul), datetime(2024, 5, 3, 1, 0))

    def test_naive_is_left_alone(self):
        naive = datetime(2024, 5, 3, 10, 0)
        self.assertEqual(to_naive_utc(naive), naive)


if __name__ == "__main__":
    unittest.main()
