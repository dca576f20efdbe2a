"""Types pour le module s0_browser."""

from dataclasses import dataclass
from typing import Optional

from selenium.webdriver.remote.webdriver import WebDriver

from src.config import BROWSER_CONFIG, WAIT_TIMES


@dataclass
class BrowserConfig:
    """Configuration du navigateur hébergeant le démineur."""
    headless: bool = BROWSER_CONFIG['headless']
    maximize: bool = BROWSER_CONFIG['maximize']
    url: str = BROWSER_CONFIG['url']
    window_size: str = "1920,1080"
    page_load_timeout: int = WAIT_TIMES['page_load']


@dataclass
class BrowserHandle:
    """Handle vers un navigateur actif."""
    driver: WebDriver
    is_started: bool = True

    def close(self) -> None:
        """Ferme le navigateur."""
        if self.driver and self.is_started:
            self.driver.quit()
            self.is_started = False
