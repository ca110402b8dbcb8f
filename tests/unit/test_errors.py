"""Tests for fa_common.errors and fa_common.response."""

from src.fa_common.errors import (
    AppError,
    AuctionAlreadyClosedError,
    AuctionNotFoundError,
    BidBelowIncrementError,
    BidRejectedError,
    InvalidMoneyFormatError,
    LotNotFoundError,
    NegativeNetAmountError,
)
from src.fa_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_custom_http_status(self) -> None:
        err = AppError(code=1001, message="Lot missing", http_status=404)
        assert err.http_status == 404

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1001, message="test"), Exception)


class TestSpecificErrors:
    def test_lot_not_found(self) -> None:
        err = LotNotFoundError("lot-123")
        assert err.code == 1001
        assert err.http_status == 404
        assert "lot-123" in err.message

    def test_auction_not_found(self) -> None:
        err = AuctionNotFoundError("auc-1")
        assert err.code == 3001
        assert err.http_status == 404

    def test_already_closed(self) -> None:
        err = AuctionAlreadyClosedError("auc-1")
        assert err.code == 3002
        assert err.http_status == 409

    def test_bid_rejection_carries_minimum(self) -> None:
        err = BidBelowIncrementError("Bid must be at least ₱125.00", 12500)
        assert isinstance(err, BidRejectedError)
        assert err.required_minimum == 12500
        assert err.http_status == 422

    def test_invalid_money_format(self) -> None:
        err = InvalidMoneyFormatError("abc")
        assert err.code == 5001
        assert "abc" in err.message

    def test_negative_net(self) -> None:
        err = NegativeNetAmountError(gross=1000, net=-1560)
        assert err.code == 5002
        assert "-1560" in err.message


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"id": "abc"})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"id": "abc"}

    def test_request_id_override(self) -> None:
        resp = success_response(None, request_id="req_fixed")
        assert resp.request_id == "req_fixed"

    def test_error(self) -> None:
        resp = error_response(4003, "Bid must be at least ₱125.00")
        assert resp.code == 4003
        assert resp.data is None

    def test_serialization(self) -> None:
        d = ApiResponse(data={"amount_cents": 12500}).model_dump()
        for key in ("code", "message", "data", "timestamp", "request_id"):
            assert key in d
