"""
Console Channel
===============

Interactive terminal session: greeting audio, banner, name prompt and
the read loop that hands each line to the response router.
"""

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from colorama import Fore, Style, init

from ..chatbot import ResponseRouter
from ..config import ConsoleConfig
from .base_channel import BaseChannel
from .voice import VoiceGreeting

logger = logging.getLogger(__name__)


BANNER = r"""
   _____              _
  / ____|            | |
 | (___   _ __   ___ | |_ _ __ ___  ___ _ __
  \___ \ | '_ \ / _ \| __| '__/ _ \/ _ \ '__|
  ____) || | | | (_) | |_| | |  __/  __/ |
 |_____/ |_| |_|\___/ \__|_|  \___|\___|_|
"""

WELCOME_BOX = (
    "\n  ╔════════════════════════════════════╗\n"
    "  ║   CYBERSECURITY AWARENESS BOT      ║\n"
    "  ╚════════════════════════════════════╝"
)

EXIT_COMMAND = "exit"
FAREWELL = "Goodbye! Stay safe online."
EMPTY_INPUT_REMINDER = "Please enter a question or 'exit'."
NAME_PROMPT = "\nWhat is your name? "
NAME_RETRY_PROMPT = "Please enter a valid name: "


class SessionEnded(Exception):
    """Raised when the user closes input before the session is over."""
    pass


class ConsoleChannel(BaseChannel):
    """Terminal presentation for one chat session."""

    def __init__(self,
                 router: ResponseRouter,
                 config: Optional[ConsoleConfig] = None,
                 greeting: Optional[VoiceGreeting] = None,
                 input_func: Callable[[str], str] = input,
                 output: Optional[TextIO] = None,
                 sleep: Callable[[float], None] = time.sleep):
        """
        Initialize the console channel.

        Args:
            router: Response router for the session
            config: Console settings
            greeting: Optional greeting audio player
            input_func: Reads one line after showing a prompt
            output: Stream to write to; sys.stdout when omitted
            sleep: Delay function used for the typing effect
        """
        super().__init__(router)
        self.config = config or ConsoleConfig()
        self.greeting = greeting
        self.input_func = input_func
        self.output = output
        self.sleep = sleep
        self.user_name = ""

    @property
    def name(self) -> str:
        return "console"

    @property
    def _out(self) -> TextIO:
        return self.output or sys.stdout

    def _write(self, text: str = "", color: Optional[str] = None, end: str = "\n"):
        if color and self.config.use_color:
            text = f"{color}{text}{Style.RESET_ALL}"
        self._out.write(text + end)
        self._out.flush()

    def _read(self, prompt: str) -> str:
        try:
            line = self.input_func(prompt)
        except EOFError:
            raise SessionEnded() from None
        return line or ""

    def type_write(self, text: str):
        """Write text one character at a time."""
        delay = self.config.typing_delay
        for ch in text:
            self._write(ch, end="")
            if delay > 0:
                self.sleep(delay)
        self._write()

    def play_greeting(self):
        if self.greeting is None:
            return
        notice = self.greeting.play()
        if notice:
            self._write(notice)

    def show_banner(self):
        self._write(BANNER, Fore.BLUE)
        if self.config.banner_delay > 0:
            self.sleep(self.config.banner_delay)

    def ask_user_name(self) -> str:
        """Prompt until a non-empty name is given."""
        name = self._read(NAME_PROMPT).strip()
        while not name:
            name = self._read(NAME_RETRY_PROMPT).strip()
        self.user_name = name
        return name

    def show_welcome(self):
        self._write(WELCOME_BOX, Fore.CYAN)
        self._write(f"\nWelcome, {self.user_name}! I'm here to help you stay safe online.", Fore.YELLOW)
        self._write("\nAsk me about phishing, passwords, privacy, or any security topic.", Fore.MAGENTA)

    def handle_line(self, line: str) -> bool:
        """
        Process one input line.

        Returns:
            False when the user asked to exit, True otherwise
        """
        normalized = line.strip().lower()
        if not normalized:
            self._write(EMPTY_INPUT_REMINDER)
            return True
        if normalized == EXIT_COMMAND:
            return False

        result = self.router.route(line, self.memory, self.user_name)
        logger.info(f"Answered via {result.strategy.value}")
        self.type_write(result.text)
        return True

    def run(self) -> int:
        """Run the session until the user exits."""
        if self.config.use_color and self.output is None:
            init()

        self.is_running = True
        self.memory.clear()
        logger.info("Console session started")

        try:
            self.play_greeting()
            self.show_banner()
            self.ask_user_name()
            self.show_welcome()

            while self.handle_line(self._read("\n" + self.config.prompt)):
                pass
        except (SessionEnded, KeyboardInterrupt):
            self._write()
            logger.info("Input closed, ending session")

        self._write(FAREWELL)
        self.is_running = False
        logger.info("Console session ended")
        return 0
