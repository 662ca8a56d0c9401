from freshstock.data.locality import Locality
from freshstock.data.repositories.base import SqlRepository
from freshstock.data.seller import Seller
from freshstock.domain.seller import SELLER_EXISTS, SELLER_NOT_FOUND


class SellerRepository(SqlRepository):
    model = Seller
    not_found_message = SELLER_NOT_FOUND
    already_exists_message = SELLER_EXISTS
    unique_field = 'cid'
    references = (('locality_id', Locality),)
