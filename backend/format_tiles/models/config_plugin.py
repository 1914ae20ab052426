from sqlalchemy import Column, Integer, String, Text, UniqueConstraint

from format_tiles.db.base import Base


class ConfigPlugin(Base):
    __tablename__ = "config_plugins"
    __table_args__ = (UniqueConstraint("plugin", "name", name="uq_config_plugin"),)

    id = Column(Integer, primary_key=True, index=True)
    plugin = Column(String(100), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    value = Column(Text(), nullable=False, default="")
