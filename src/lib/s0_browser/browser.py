"""Gestion du navigateur Selenium (backend "browser")."""

from typing import Optional

from selenium import webdriver
from selenium.webdriver.common.by import By
from selenium.webdriver.support.ui import WebDriverWait
from selenium.webdriver.support import expected_conditions as EC
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.chrome.options import Options
from webdriver_manager.chrome import ChromeDriverManager

from .types import BrowserConfig, BrowserHandle


class BrowserManager:
    """Démarre et arrête le Chrome piloté qui affiche la partie."""

    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or BrowserConfig()
        self.handle: Optional[BrowserHandle] = None

    def build_options(self) -> Options:
        options = Options()
        if self.config.headless:
            options.add_argument("--headless=new")
            options.add_argument("--disable-gpu")
            options.add_argument(f"--window-size={self.config.window_size}")
        elif self.config.maximize:
            options.add_argument("--start-maximized")

        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        # Zoom forcé : la géométrie de la grille est calibrée en pixels physiques
        options.add_argument("--force-device-scale-factor=1")
        options.add_experimental_option("excludeSwitches", ["enable-automation"])
        return options

    def start(self) -> BrowserHandle:
        """Démarre le navigateur Chrome."""
        try:
            print("[NAVIGATEUR] Installation du pilote Chrome...")
            service = Service(ChromeDriverManager().install())
            driver = webdriver.Chrome(service=service, options=self.build_options())
            driver.set_page_load_timeout(self.config.page_load_timeout)

            if self.config.maximize and not self.config.headless:
                driver.maximize_window()

            print("[NAVIGATEUR] Chrome démarré")
            self.handle = BrowserHandle(driver=driver, is_started=True)
            return self.handle

        except WebDriverException as e:
            print(f"[ERREUR] Erreur lors du démarrage du navigateur: {e}")
            raise


def start_browser(config: Optional[BrowserConfig] = None) -> BrowserHandle:
    """Démarre un navigateur et retourne un handle."""
    return BrowserManager(config).start()


def stop_browser(handle: Optional[BrowserHandle]) -> None:
    """Arrête un navigateur via son handle."""
    if handle:
        handle.close()
        print("[FIN] Navigateur arrêté")


def navigate_to(handle: BrowserHandle, url: str, timeout: int = 10) -> bool:
    """Navigue vers une URL et attend le chargement du document."""
    if not handle or not handle.is_started:
        print("[ERREUR] Navigateur non démarré")
        return False

    try:
        print(f"[NAVIGATION] {url}")
        handle.driver.get(url)
        WebDriverWait(handle.driver, timeout).until(
            EC.presence_of_element_located((By.TAG_NAME, "body"))
        )
        return True
    except TimeoutException:
        print("[ERREUR] Timeout lors du chargement de la page")
    except WebDriverException as e:
        print(f"[ERREUR] Erreur lors de la navigation: {e}")
    return False
