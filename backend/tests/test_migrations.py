"""Tests for the legacy document upgrade step."""

from migrations import upgrade_document


class TestUpgradeDocument:
    """Tests for upgrade_document."""

    def test_current_document_unchanged(self):
        doc = {
            "coupleName1": "A",
            "guests": [{"id": "g1", "plusOnes": [{"id": "p1"}]}],
            "tables": [{"id": "t1", "capacity": 4, "assignedGuests": ["g1"]}],
        }
        assert upgrade_document(doc) == doc

    def test_input_not_modified(self):
        doc = {"guests": [{"id": 1}], "tables": [{"id": 2, "seats": []}]}
        upgrade_document(doc)
        assert doc == {"guests": [{"id": 1}], "tables": [{"id": 2, "seats": []}]}

    def test_numeric_ids_become_text(self):
        doc = upgrade_document({
            "guests": [{"id": 1}],
            "wishlist": [{"id": 2}],
            "media": [{"id": 3, "filename": "a.jpg"}],
            "tables": [{"id": 4, "assigned_guests": [1, "g2"]}],
        })
        assert doc["guests"][0]["id"] == "1"
        assert doc["wishlist"][0]["id"] == "2"
        assert doc["media"][0]["id"] == "3"
        assert doc["tables"][0]["id"] == "4"
        assert doc["tables"][0]["assigned_guests"] == ["1", "g2"]

    def test_todo_ids_left_alone(self):
        doc = upgrade_document({"todos": [{"id": 1, "text": "x"}]})
        assert doc["todos"][0]["id"] == 1

    def test_seats_converted(self):
        doc = upgrade_document({"tables": [{
            "id": 5,
            "name": "Head",
            "seats": [
                {"id": 1, "guestId": None, "guestName": ""},
                {"id": 2, "guestId": 9, "guestName": "Lee"},
            ],
        }]})
        table = doc["tables"][0]
        assert "seats" not in table
        assert table["capacity"] == 2
        assert table["assignedGuests"] == ["9"]
        assert table["seatAssignments"] == [
            {"tableId": "5", "seatNumber": 2, "guestId": "9", "guestName": "Lee"},
        ]

    def test_explicit_capacity_kept(self):
        doc = upgrade_document({"tables": [{"id": "t1", "capacity": 10, "seats": []}]})
        assert doc["tables"][0]["capacity"] == 10

    def test_non_dict_passthrough(self):
        assert upgrade_document([1, 2]) == [1, 2]

    def test_malformed_collections_passthrough(self):
        doc = {"guests": "everyone", "tables": None}
        assert upgrade_document(doc) == doc
