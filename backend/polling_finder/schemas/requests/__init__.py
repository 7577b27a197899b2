from polling_finder.schemas.requests.search_polling_station import SearchPollingStation

__all__ = ['SearchPollingStation']
