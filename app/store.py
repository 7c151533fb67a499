from app.schemas.reservation import ReservationData, ReservationStatus

_CLOSED = (ReservationStatus.cancelled, ReservationStatus.completed)


class ReservationStore:
    def __init__(self, max_reservations: int = 1000) -> None:
        self._reservations: dict[str, ReservationData] = {}
        self._max_reservations = max_reservations

    def __len__(self) -> int:
        return len(self._reservations)

    def _evict(self) -> None:
        if len(self._reservations) <= self._max_reservations:
            return
        # Remove oldest cancelled/completed reservations first
        candidates = sorted(
            (r for r in self._reservations.values() if r.status in _CLOSED),
            key=lambda r: r.created_at,
        )
        while len(self._reservations) > self._max_reservations and candidates:
            self._reservations.pop(candidates.pop(0).id, None)

    def save(self, reservation: ReservationData) -> ReservationData:
        self._reservations[reservation.id] = reservation
        self._evict()
        return reservation

    def get(self, reservation_id: str) -> ReservationData | None:
        return self._reservations.get(reservation_id)

    def find_by_confirmation_code(self, code: str) -> ReservationData | None:
        for reservation in self._reservations.values():
            if reservation.confirmation_code == code:
                return reservation
        return None
