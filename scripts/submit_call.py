import requests


def main():
    url = "http://127.0.0.1:8081/calls"

    resp = requests.post(url, data={
        "recipientPhoneNumber": "5551234567",
        "recipientContext": "Tony's Pizza",
        "objective": "Order a pizza",
        "otherContext": "Large pepperoni, pickup at 7pm",
    })

    print("Status:", resp.status_code)
    print("Headers:", resp.headers.get("content-type"))
    print("Body:", resp.text)


if __name__ == "__main__":
    main()
