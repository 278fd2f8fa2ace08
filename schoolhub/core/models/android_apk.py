"""Android build uploaded for distribution to campus devices."""

from sqlalchemy import BigInteger, Column, DateTime, String, Text, UniqueConstraint

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class AndroidApk(Base):
    __tablename__ = "android_apks"
    __table_args__ = (UniqueConstraint("package_name", "version", name="uq_apk_package_version"),)

    id = Column(String(36), primary_key=True, default=new_id)
    package_name = Column(String(255), nullable=False, index=True)
    version = Column(String(50), nullable=False)
    file_path = Column(Text, nullable=False)
    file_size = Column(BigInteger, nullable=True)
    upload_date = Column(DateTime, default=utcnow, nullable=False)
