from freshstock.data.buyer import Buyer
from freshstock.data.repositories.base import SqlRepository
from freshstock.domain.buyer import BUYER_EXISTS, BUYER_NOT_FOUND


class BuyerRepository(SqlRepository):
    model = Buyer
    not_found_message = BUYER_NOT_FOUND
    already_exists_message = BUYER_EXISTS
    unique_field = 'card_number_id'
