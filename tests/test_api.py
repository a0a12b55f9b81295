"""End to end tests through the HTTP API"""

from datetime import date

API = "/api/v1"


def create_vehicle(client, vehicle_type="highroof"):
    response = client.post(f"{API}/vehicles/", json={
        "name": "Highroof 1",
        "registrationNumber": "mlt-4411",
        "type": vehicle_type
    })
    assert response.status_code == 201
    return response.json()


def create_voucher(client, vehicle_id):
    response = client.post(f"{API}/vouchers/", json={
        "vehicleId": vehicle_id,
        "date": date.today().isoformat(),
        "departureTime": "14:30",
        "driverName": "Aslam",
        "driverMobile": "0300-1234567"
    })
    assert response.status_code == 201
    return response.json()


def book(client, voucher_id, seat_ids, destination="Lahore", discount=0):
    return client.post(f"{API}/vouchers/{voucher_id}/tickets", json={
        "seatIds": seat_ids,
        "passenger": {"name": "Ali", "cnic": "35202-1234567-1"},
        "destination": destination,
        "totalDiscount": discount
    })


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestTerminalApi:
    def test_setup_flow(self, client):
        assert client.get(f"{API}/terminal/").json()["isSetupComplete"] is False

        response = client.put(f"{API}/terminal/", json={
            "name": "Faisal Movers",
            "city": "Multan",
            "area": "Chowk Kumharan",
            "contactNumber": "061-1234567"
        })
        assert response.status_code == 200

        data = client.get(f"{API}/terminal/").json()
        assert data["isSetupComplete"] is True
        assert data["terminalInfo"]["contactNumber"] == "061-1234567"

    def test_blank_field_rejected(self, client):
        response = client.put(f"{API}/terminal/", json={
            "name": "  ", "city": "Multan", "area": "Cantt", "contactNumber": "061"
        })
        assert response.status_code == 422


class TestVehicleAndRouteApi:
    def test_vehicle_gets_preset_layout(self, client):
        vehicle = create_vehicle(client)

        assert vehicle["registrationNumber"] == "MLT-4411"
        assert len(vehicle["seats"]) == 19
        assert vehicle["seats"][0]["isDriver"] is True

    def test_default_routes(self, client):
        routes = client.get(f"{API}/routes/", params={"origin": "Multan", "vehicle_type": "bus"}).json()

        assert sorted((r["destination"], r["fare"]) for r in routes) == [
            ("Faisalabad", 1500), ("Islamabad", 3000), ("Lahore", 1800)
        ]

    def test_unknown_vehicle(self, client):
        assert client.get(f"{API}/vehicles/vehicle-missing").status_code == 404


class TestBookingApi:
    def test_booking_flow(self, client):
        vehicle = create_vehicle(client)
        voucher = create_voucher(client, vehicle["id"])

        response = book(client, voucher["id"], [3, 7], discount=300)
        assert response.status_code == 201
        ticket = response.json()
        assert ticket["seatIds"] == [3, 7]
        assert ticket["totalBaseFare"] == 3000
        assert ticket["finalTotal"] == 2700

        voucher = client.get(f"{API}/vouchers/{voucher['id']}").json()
        assert [(s["seatId"], s["finalFare"]) for s in voucher["bookedSeats"]] == [(3, 1350), (7, 1350)]

        seat_ticket = client.get(f"{API}/vouchers/{voucher['id']}/seats/7/ticket").json()
        assert seat_ticket["id"] == ticket["id"]
        assert client.get(f"{API}/vouchers/{voucher['id']}/seats/5/ticket").json() is None

    def test_double_booking_conflict(self, client):
        voucher = create_voucher(client, create_vehicle(client)["id"])
        book(client, voucher["id"], [3])

        response = book(client, voucher["id"], [3, 4])

        assert response.status_code == 409
        assert "already booked" in response.json()["detail"]

    def test_validation_error(self, client):
        voucher = create_voucher(client, create_vehicle(client)["id"])

        response = book(client, voucher["id"], [3], discount=5000)

        assert response.status_code == 400

    def test_edit_and_cancel(self, client):
        voucher = create_voucher(client, create_vehicle(client)["id"])
        ticket = book(client, voucher["id"], [3, 7]).json()
        url = f"{API}/vouchers/{voucher['id']}/tickets/{ticket['id']}"

        edited = client.patch(url, json={"destination": "Islamabad"}).json()
        assert edited["totalBaseFare"] == 5000

        response = client.delete(url)
        assert response.json()["releasedSeatIds"] == [3, 7]
        assert client.get(f"{API}/vouchers/{voucher['id']}/tickets").json() == []

    def test_fare_quote(self, client):
        response = client.post(f"{API}/vouchers/fare-quote", json={
            "baseFarePerSeat": 1500, "seatCount": 3, "totalDiscount": 100
        })

        assert response.json()["finalTotal"] == 4400

    def test_ticket_receipt(self, client):
        voucher = create_voucher(client, create_vehicle(client)["id"])
        ticket = book(client, voucher["id"], [3, 7], discount=300).json()

        receipt = client.get(f"{API}/vouchers/{voucher['id']}/tickets/{ticket['id']}/receipt").json()

        assert receipt["route"] == {"origin": "MULTAN", "destination": "LAHORE"}
        assert receipt["fare"]["total"] == "2700 PKR"


class TestVoucherLifecycleApi:
    def test_depart_and_close(self, client):
        voucher = create_voucher(client, create_vehicle(client)["id"])
        book(client, voucher["id"], [3, 7], discount=300)
        book(client, voucher["id"], [1], destination="Faisalabad")
        base = f"{API}/vouchers/{voucher['id']}"

        summary = client.get(f"{base}/summary", params={"terminal_tax": "100", "cargo": "50"}).json()
        assert summary["totalFare"] == 3900
        assert summary["grandTotal"] == 3850
        assert summary["requiresConfirmation"] is False

        departed = client.post(f"{base}/depart", json={"terminalTax": "100", "cargo": "50"}).json()
        assert departed["status"] == "departed"

        assert client.get(f"{base}/status").json()["canEdit"] is False
        assert book(client, voucher["id"], [2]).status_code == 409

        receipt = client.get(f"{base}/receipt").json()
        assert receipt["summary"]["grandTotal"] == "3850 PKR"

        assert client.post(f"{base}/close").json()["status"] == "closed"
        assert client.post(f"{base}/close").status_code == 409

    def test_negative_total_needs_acknowledgement(self, client):
        voucher = create_voucher(client, create_vehicle(client)["id"])
        url = f"{API}/vouchers/{voucher['id']}/depart"

        assert client.post(url, json={"terminalTax": 200}).status_code == 409
        response = client.post(url, json={"terminalTax": 200, "acknowledgeNegativeTotal": True})
        assert response.status_code == 200

    def test_invalid_cargo(self, client):
        voucher = create_voucher(client, create_vehicle(client)["id"])

        response = client.post(f"{API}/vouchers/{voucher['id']}/depart", json={"cargo": "abc"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Cargo must be a valid number"

    def test_todays_vouchers(self, client):
        voucher = create_voucher(client, create_vehicle(client)["id"])

        today = client.get(f"{API}/vouchers/today").json()

        assert [v["id"] for v in today] == [voucher["id"]]


class TestReportsApi:
    def test_weekly_report(self, client):
        voucher = create_voucher(client, create_vehicle(client)["id"])
        book(client, voucher["id"], [3, 7], discount=300)

        report = client.get(f"{API}/reports/revenue", params={"days": 7}).json()

        assert report["totalRevenue"] == 2700
        assert report["totalPassengers"] == 2
        assert len(report["daily"]) == 7

    def test_unsupported_period(self, client):
        assert client.get(f"{API}/reports/revenue", params={"days": 10}).status_code == 400
