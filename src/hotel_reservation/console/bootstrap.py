from hotel_reservation.customer.applications import CustomerDirectory
from hotel_reservation.customer.infrastructure import InMemoryCustomerRepository
from hotel_reservation.handlers import AdminResource, HotelResource
from hotel_reservation.reservation.applications import ReservationStore
from hotel_reservation.reservation.domain.factory import ReservationFactory
from hotel_reservation.reservation.infrastructure import (
    InMemoryReservationRepository,
    InMemoryRoomRepository,
)


def build_resources() -> tuple[HotelResource, AdminResource]:
    """ストアと顧客ディレクトリを1つずつ生成し、両方の窓口で共有する"""
    store = ReservationStore(
        room_repository=InMemoryRoomRepository(),
        reservation_repository=InMemoryReservationRepository(),
        factory=ReservationFactory(),
    )
    directory = CustomerDirectory(repository=InMemoryCustomerRepository())
    return HotelResource(store, directory), AdminResource(store, directory)
