from .extensions import db


class Restaurant(db.Model):
    __tablename__ = 'restaurants'
    __table_args__ = {'sqlite_autoincrement': True}
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    # 既有資料表的欄位名稱為 restaurants
    name = db.Column('restaurants', db.Text, nullable=True)

    def __eq__(self, other):
        if not isinstance(other, Restaurant):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        # stable across flush; one instance per id within a session
        return id(self)

    def __repr__(self):
        return f"<Restaurant id={self.id} name={self.name!r}>"

    def to_dict(self):
        return {"id": self.id, "name": self.name}
