# verify_api.py
# Manual smoke check against a running server:  API_URL=http://host/api python verify_api.py
import os
import sys

import httpx

API_URL = os.getenv("API_URL", "http://localhost:8000/api").rstrip("/")


def verify() -> bool:
    print("Verifying API health at", API_URL)
    try:
        with httpx.Client(timeout=10) as client:
            health = client.get(f"{API_URL}/health")
            print("Health:", health.status_code, health.json())
            if health.status_code != 200:
                print("Health check failed")
                return False

            employees = client.get(f"{API_URL}/employees")
            if employees.status_code == 200:
                print("Employees fetched successfully, count:", len(employees.json()))
            else:
                print("Employees fetch failed:", employees.status_code, employees.text)

            company = client.get(f"{API_URL}/company")
            if company.status_code == 200:
                print("Company fetched successfully:", "Found" if company.json() else "Null")
            else:
                print("Company fetch failed:", company.status_code, company.text)

            return employees.status_code == 200 and company.status_code == 200
    except httpx.HTTPError as e:
        print("Verification failed:", repr(e))
        return False


if __name__ == "__main__":
    sys.exit(0 if verify() else 1)
