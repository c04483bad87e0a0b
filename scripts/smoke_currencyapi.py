import json
import os
import sys
from datetime import date, datetime, timedelta, timezone

from currencyapi import Currencyapi, CurrencyapiError, get_settings, init_logging

"""Live smoke test against api.currencyapi.com.

Needs CURRENCYAPI_API_KEY. Calls every endpoint once (range is only available
on paid plans and reports its error instead of aborting) and prints a JSON
summary. /status calls do not count against the monthly quota; the others do.
"""


def run():
    init_logging(debug=get_settings().debug)
    yesterday = date.today() - timedelta(days=1)
    summary = {}
    with Currencyapi() as client:
        summary["status"] = client.status().quotas.month.model_dump()
        summary["currencies"] = len(client.currencies().data)
        summary["latest"] = client.latest("EUR", ["USD", "GBP"]).model_dump(mode="json")
        summary["historical"] = client.historical("EUR", yesterday, "USD").model_dump(mode="json")
        summary["convert"] = client.convert("EUR", yesterday, 100, "USD").model_dump(mode="json")
        end = datetime.now(timezone.utc).replace(microsecond=0) - timedelta(days=1)
        try:
            res = client.range("EUR", end - timedelta(days=3), end, "USD", accuracy="day")
            summary["range"] = res.model_dump(mode="json")
        except CurrencyapiError as e:
            summary["range"] = {"error": str(e)}
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    sys.path.append(os.getcwd())
    run()
