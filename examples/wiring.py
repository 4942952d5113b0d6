from ordertaking import wire as W
from ordertaking.settings import load_settings
from ordertaking.wire import application, endpoint

settings = load_settings({"pricing": {"product_prices": {"W1234": "12.50", "G123": "4.00"}}})

endp = endpoint(W.default_workflow(settings)).expose(
    W.HTTPRouteTrigger("POST", "/orders"),
    W.RequestResponseCodec(request=W.OrderFormDto, response=W.HttpResponse),
)

app = application().mount(endp)


fastapi_app = W.contrib.fastapi.from_application(app, title=settings.http.title)
# Run yourself with uvicorn and POST an order form to /orders!
