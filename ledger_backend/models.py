# ledger_backend/models.py
# lightweight model classes (not DB-bound ORM)


def json_object(data):
    """Request bodies that are not JSON objects are treated as empty."""
    return data if isinstance(data, dict) else {}


class User:
    def __init__(self, id, username, name, password_hash):
        self.id = id
        self.username = username
        self.name = name
        self.password_hash = password_hash

    @classmethod
    def from_row(cls, row):
        return cls(row["id"], row["username"], row["name"], row["password"])

    def to_dict(self):
        # never expose the hash
        return {"id": self.id, "username": self.username, "name": self.name}


class Transaction:
    FIELDS = ("type", "category", "amount", "date", "description")

    def __init__(self, id, type=None, category=None, amount=None, date=None, description=None):
        self.id = id
        self.type = type
        self.category = category
        self.amount = amount
        self.date = date
        self.description = description

    @classmethod
    def from_row(cls, row):
        return cls(row["id"], *(row[field] for field in cls.FIELDS))

    @classmethod
    def values_from_payload(cls, data):
        """Pull the five writable fields out of a request body, verbatim."""
        return tuple(data.get(field) for field in cls.FIELDS)

    def to_dict(self):
        return {
            "id": self.id,
            "type": self.type,
            "category": self.category,
            "amount": self.amount,
            "date": self.date,
            "description": self.description,
        }
