"""
Promotional advertisements.

An advertisement is shown while ``is_active`` is set and the current time
falls inside ``[start_date, end_date)``. Nothing flips the flag on a
timer: ``deactivate_expired`` is the on-demand sweep, and until it runs an
ad past its end date still reads as expired through ``is_expired``.
"""

import logging
from datetime import datetime

from sqlalchemy import desc, select, update

from petcare.core.errors import NotFoundError, ValidationError
from petcare.core.timeutils import to_naive_utc, utcnow
from petcare.core.uploads import remove_upload
from petcare.db.models.advertisement import Advertisement
from petcare.services.base import BaseService

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 1


def _check_window(start_date: datetime, end_date: datetime, now: datetime) -> None:
    if end_date <= now:
        raise ValidationError("End date must be in the future")
    if start_date >= end_date:
        raise ValidationError("Start date must be before end date")


class AdvertisementService(BaseService):
    def _running_clause(self, now: datetime):
        return (
            Advertisement.is_active.is_(True),
            Advertisement.start_date <= now,
            Advertisement.end_date > now,
        )

    def _ordered(self, stmt):
        return stmt.order_by(desc(Advertisement.priority), desc(Advertisement.created_at), desc(Advertisement.id))

    def get(self, ad_id: int) -> Advertisement:
        ad = self.db.get(Advertisement, ad_id)
        if ad is None:
            raise NotFoundError("Advertisement not found")
        return ad

    def create(
        self,
        image: str,
        end_date: datetime,
        link: str | None = None,
        start_date: datetime | None = None,
        priority: int | None = None,
    ) -> Advertisement:
        if not image:
            raise ValidationError("Image is required")

        now = utcnow()
        start = to_naive_utc(start_date) if start_date else now
        end = to_naive_utc(end_date)
        _check_window(start, end, now)

        ad = Advertisement(
            image=image,
            link=link,
            start_date=start,
            end_date=end,
            priority=priority if priority is not None else DEFAULT_PRIORITY,
            is_active=True,
        )
        with self.transaction():
            self.db.add(ad)
        self.db.refresh(ad)
        logger.info("Created advertisement %s running %s -> %s", ad.id, ad.start_date, ad.end_date)
        return ad

    def list_all(self, is_active: bool | None = None, include_expired: bool = False) -> list[Advertisement]:
        stmt = select(Advertisement)
        if is_active is not None:
            stmt = stmt.where(Advertisement.is_active.is_(is_active))
        if not include_expired:
            stmt = stmt.where(Advertisement.end_date > utcnow())
        return list(self.db.execute(self._ordered(stmt)).scalars().all())

    def list_running(self) -> list[Advertisement]:
        """Return ads currently on display and count one view for each."""
        now = utcnow()
        ads = list(self.db.execute(self._ordered(select(Advertisement).where(*self._running_clause(now)))).scalars().all())
        if ads:
            with self.transaction():
                self.db.execute(
                    update(Advertisement)
                    .where(Advertisement.id.in_([ad.id for ad in ads]))
                    .values(views=Advertisement.views + 1)
                    .execution_options(synchronize_session=False)
                )
            for ad in ads:
                self.db.refresh(ad)
        return ads

    def update(self, ad_id: int, changes: dict) -> Advertisement:
        ad = self.get(ad_id)
        now = utcnow()

        start = to_naive_utc(changes["start_date"]) if changes.get("start_date") else ad.start_date
        end = to_naive_utc(changes["end_date"]) if changes.get("end_date") else ad.end_date
        if changes.get("end_date"):
            _check_window(start, end, now)
        elif start >= end:
            raise ValidationError("Start date must be before end date")

        previous_image = ad.image
        with self.transaction():
            ad.start_date = start
            ad.end_date = end
            for field in ("image", "link", "priority", "is_active"):
                if changes.get(field) is not None:
                    setattr(ad, field, changes[field])

        self.db.refresh(ad)
        if changes.get("image") and previous_image != ad.image:
            remove_upload(previous_image)
        logger.info("Updated advertisement %s", ad_id)
        return ad

    def delete(self, ad_id: int) -> None:
        ad = self.get(ad_id)
        image = ad.image
        with self.transaction():
            self.db.delete(ad)
        remove_upload(image)
        logger.info("Deleted advertisement %s", ad_id)

    def record_click(self, ad_id: int) -> Advertisement:
        now = utcnow()
        ad = self.db.execute(
            select(Advertisement).where(Advertisement.id == ad_id, *self._running_clause(now))
        ).scalar_one_or_none()
        if ad is None:
            raise NotFoundError("Advertisement not found or expired")

        with self.transaction():
            self.db.execute(
                update(Advertisement)
                .where(Advertisement.id == ad_id)
                .values(clicks=Advertisement.clicks + 1)
                .execution_options(synchronize_session=False)
            )
        self.db.refresh(ad)
        return ad

    def stats(self, ad_id: int) -> dict:
        ad = self.get(ad_id)
        ctr = round(ad.clicks / ad.views * 100, 2) if ad.views > 0 else 0.0
        return {
            "id": ad.id,
            "clicks": ad.clicks,
            "views": ad.views,
            "ctr": ctr,
            "is_active": ad.is_active,
            "is_expired": ad.is_expired(),
            "start_date": ad.start_date,
            "end_date": ad.end_date,
            "created_at": ad.created_at,
        }

    def deactivate_expired(self) -> int:
        """Sweep: turn off every active ad whose end date has passed."""
        now = utcnow()
        with self.transaction():
            result = self.db.execute(
                update(Advertisement)
                .where(Advertisement.is_active.is_(True), Advertisement.end_date <= now)
                .values(is_active=False)
                .execution_options(synchronize_session=False)
            )
            count = result.rowcount or 0
        logger.info("Deactivated %d expired advertisements", count)
        return count
