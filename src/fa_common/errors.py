"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Lot
  3xxx: Auction
  4xxx: Bid
  5xxx: Settlement / Money
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Lot ---

class LotNotFoundError(AppError):
    def __init__(self, lot_id: str) -> None:
        super().__init__(1001, f"Lot not found: {lot_id}", 404)


class LotNotAvailableError(AppError):
    def __init__(self, lot_id: str, status: str) -> None:
        super().__init__(1002, f"Lot {lot_id} in status {status} is not available for auction", 422)


class LotNotPendingApprovalError(AppError):
    def __init__(self, lot_id: str, status: str) -> None:
        super().__init__(1003, f"Lot {lot_id} in status {status} is not pending approval", 422)


# --- 3xxx: Auction ---

class AuctionNotFoundError(AppError):
    def __init__(self, auction_id: str) -> None:
        super().__init__(3001, f"Auction not found: {auction_id}", 404)


class AuctionAlreadyClosedError(AppError):
    def __init__(self, auction_id: str) -> None:
        super().__init__(3002, f"Auction is already closed: {auction_id}", 409)


class AuctionNotStartedError(AppError):
    def __init__(self, auction_id: str) -> None:
        super().__init__(3003, f"Auction has not started: {auction_id}", 422)


class AuctionNotStartableError(AppError):
    def __init__(self, auction_id: str, status: str) -> None:
        super().__init__(
            3004, f"Auction {auction_id} in status {status} cannot be started yet", 422
        )


class AuctionAlreadyExistsError(AppError):
    def __init__(self, lot_id: str) -> None:
        super().__init__(3005, f"There is already an auction in progress for lot {lot_id}", 409)


class InvalidAuctionWindowError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(3006, f"Invalid auction window: {detail}", 400)


# --- 4xxx: Bid ---

class BidRejectedError(AppError):
    """Base for every bid rejection; carries the minimum the bidder must meet."""

    def __init__(self, code: int, message: str, required_minimum: int | None = None) -> None:
        self.required_minimum = required_minimum
        super().__init__(code, message, 422)


class AuctionNotActiveError(BidRejectedError):
    def __init__(self, message: str = "Auction is not currently active") -> None:
        super().__init__(4001, message)


class BidBelowMinimumError(BidRejectedError):
    def __init__(self, message: str, required_minimum: int) -> None:
        super().__init__(4002, message, required_minimum)


class BidBelowIncrementError(BidRejectedError):
    def __init__(self, message: str, required_minimum: int) -> None:
        super().__init__(4003, message, required_minimum)


class InvalidBidAmountError(BidRejectedError):
    def __init__(self, message: str = "Invalid bid amount") -> None:
        super().__init__(4004, message)


# --- 5xxx: Settlement / Money ---

class InvalidMoneyFormatError(AppError):
    def __init__(self, text: str) -> None:
        super().__init__(5001, f"Invalid money format: {text!r}", 400)


class NegativeNetAmountError(AppError):
    def __init__(self, gross: int, net: int) -> None:
        super().__init__(
            5002,
            f"Fees exceed sale amount: gross {gross} centavos yields net {net} centavos",
            422,
        )


class NoWinningBidError(AppError):
    def __init__(self, lot_id: str) -> None:
        super().__init__(5003, f"No winning bid found for lot {lot_id}", 422)
