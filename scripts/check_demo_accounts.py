"""
Check the bundled demo accounts.
Logs in with each demo credential and prints the result.
"""
import asyncio

from climatebuddy.core.config import get_settings
from climatebuddy.core.container import build_container
from climatebuddy.core.latency import LatencySimulator
from climatebuddy.modules.auth import LoginInput


async def check_demo_accounts():
    """Log in with every demo credential"""
    container = build_container(get_settings(), latency=LatencySimulator.disabled())
    service = container.auth_service

    for credential in service.get_demo_credentials():
        result = await service.login(LoginInput(email=credential.email, password=credential.password))
        if result.success:
            print(f"OK      {credential.email} / {credential.password} ({credential.name})")
        else:
            print(f"FAILED  {credential.email}: {result.error}")


if __name__ == "__main__":
    asyncio.run(check_demo_accounts())
