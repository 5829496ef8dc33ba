"""Sound effect selection, per-channel volume and concurrent sound limits."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field

from tacotrader.dialogue import random_string
from tacotrader.stonks import StonksPriceNotification
from tacotrader.traders import TraderStatus

DEFAULT_VOLUME = 1.0
MUSIC_PATH = "audio/music/1161090_Funny-Cat.mp3"
DONNIE_SILENCE_CHANCE = 0.7

SCREAMS = (
    "audio/fx/9704__lithe-fider__fl_scream-2.wav",
    "audio/fx/9705__lithe-fider__fl_scream-3.wav",
    "audio/fx/9706__lithe-fider__fl_scream-4.wav",
)
RELIEF = ("audio/fx/758831__universfield__comedic.mp3",)
BULLISH_SOUNDS = ("audio/fx/331381__qubodup__public-domain-jump-sound.wav",)
BEARISH_SOUNDS = ("audio/fx/423526__ccolbert70eagles23__karate-chop.m4a",)
PLOPS = ("audio/fx/245645__unfa__cartoon-pop-clean.flac",)

DONNIE_VOICE_LINES = (
    "audio/soundboard/Voicy_We have a president who doesn't have a clue.mp3",
    "audio/soundboard/Voicy_Well i don't have to really get into specifics.mp3",
    "audio/soundboard/Voicy_Don't know what there doing.mp3",
    "audio/soundboard/Voicy_Because our leaders are stupid our politicians are stup.mp3",
    "audio/soundboard/Voicy_But we have people who are stupid.mp3",
    "audio/soundboard/Voicy_Don't wanna tell you everything.mp3",
    "audio/soundboard/Voicy_Free trade can be wonderful if you have smart people.mp3",
    "audio/soundboard/Voicy_How stupid are these politicians to allow this to happe.mp3",
    "audio/soundboard/Voicy_I'd give myself an A+.mp3",
    "audio/soundboard/Voicy_I don't give a damn.mp3",
    "audio/soundboard/Voicy_I don't wanna tell you.mp3",
    "audio/soundboard/Voicy_I have really nothing better to do.mp3",
    "audio/soundboard/Voicy_I'm really smart.mp3",
    "audio/soundboard/Voicy_New to this.mp3",
    "audio/soundboard/Voicy_No I didn't say that at all, I don't think you understo.mp3",
    "audio/soundboard/Voicy_Ofcourse i-m joking.mp3",
    "audio/soundboard/Voicy_Small Loan of a Million Dollars.mp3",
    "audio/soundboard/Voicy_These are corrupt people.mp3",
    "audio/soundboard/Voicy_The system is rigged.mp3",
    "audio/soundboard/Voicy_The systems is totally rigged.mp3",
    "audio/soundboard/Voicy_We don't know what's happening.mp3",
    "audio/soundboard/Voicy_Trust me, I'm like a smart person.mp3",
    "audio/soundboard/Voicy_We have people that are morally corrupt we have people .mp3",
    "audio/soundboard/Voicy_What I say is what I sayu.mp3",
)


class AudioType(enum.Enum):
    DONNIE_VOICE = 0
    TRADER_STATUS_CHANGE = 1
    PROJECTILE_SHOT = 2
    STONKS_NOTIFICATION = 3
    MUSIC = 4


class PlaybackMode(enum.Enum):
    LOOP = "loop"
    DESPAWN = "despawn"


@dataclass(eq=False)
class SoundRequest:
    """A sound to play: what, how loud, on which channel and whether it counts to a limit."""

    path: str
    volume: float
    mode: PlaybackMode
    audio_type: AudioType
    limited: bool = True


@dataclass
class VolumeSettings:
    per_channel: dict[AudioType, float] = field(
        default_factory=lambda: {audio: DEFAULT_VOLUME for audio in AudioType}
    )

    def get(self, audio: AudioType) -> float:
        return self.per_channel[audio]

    def set(self, audio: AudioType, volume: float) -> None:
        self.per_channel[audio] = volume


def _default_limits() -> dict[AudioType, int]:
    return {
        AudioType.DONNIE_VOICE: 1,
        AudioType.TRADER_STATUS_CHANGE: 3,
        AudioType.PROJECTILE_SHOT: 3,
        AudioType.STONKS_NOTIFICATION: 3,
    }


@dataclass
class AudioLimits:
    """How many more sounds each limited channel may play at once."""

    counters: dict[AudioType, int] = field(default_factory=_default_limits)

    def available(self, audio: AudioType) -> bool:
        return audio not in self.counters or self.counters[audio] > 0

    def acquire(self, audio: AudioType) -> None:
        if audio not in self.counters:
            return
        if self.counters[audio] == 0:
            raise ValueError(f"no free slot for {audio.name}")
        self.counters[audio] -= 1

    def release(self, audio: AudioType) -> None:
        if audio in self.counters:
            self.counters[audio] += 1


class AudioDirector:
    """Decides which sounds play in response to game events."""

    def __init__(
        self,
        volume: VolumeSettings | None = None,
        limits: AudioLimits | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.volume = volume if volume is not None else VolumeSettings()
        self.limits = limits if limits is not None else AudioLimits()
        self._rng = rng if rng is not None else random
        self.playing: list[SoundRequest] = []

    def _play(
        self,
        audio: AudioType,
        path: str,
        factor: float,
        mode: PlaybackMode = PlaybackMode.DESPAWN,
        limited: bool = True,
    ) -> SoundRequest:
        request = SoundRequest(path, factor * self.volume.get(audio), mode, audio, limited)
        if limited:
            self.limits.acquire(audio)
        self.playing.append(request)
        return request

    def soundtrack(self) -> SoundRequest:
        return self._play(AudioType.MUSIC, MUSIC_PATH, 0.9, PlaybackMode.LOOP, limited=False)

    def on_donnie_shot(self) -> SoundRequest | None:
        if (
            not self.limits.available(AudioType.DONNIE_VOICE)
            or self._rng.random() < DONNIE_SILENCE_CHANCE
        ):
            return None
        path = random_string(DONNIE_VOICE_LINES, self._rng)
        return self._play(AudioType.DONNIE_VOICE, path, 0.8)

    def on_trader_status_change(self, status: TraderStatus) -> SoundRequest | None:
        if not self.limits.available(AudioType.TRADER_STATUS_CHANGE):
            return None
        if status is TraderStatus.NEUTRAL:
            return None
        sounds = BEARISH_SOUNDS if status is TraderStatus.BEARISH else BULLISH_SOUNDS
        path = random_string(sounds, self._rng)
        return self._play(AudioType.TRADER_STATUS_CHANGE, path, 1.0)

    def on_projectile_shot(self) -> SoundRequest | None:
        if not self.limits.available(AudioType.PROJECTILE_SHOT):
            return None
        return self._play(AudioType.PROJECTILE_SHOT, random_string(PLOPS, self._rng), 1.0)

    def on_stonks_notification(
        self, notification: StonksPriceNotification
    ) -> SoundRequest | None:
        if not self.limits.available(AudioType.STONKS_NOTIFICATION):
            return None
        if notification is StonksPriceNotification.LOW:
            sounds, factor = SCREAMS, 0.5
        else:
            sounds, factor = RELIEF, 0.9
        path = random_string(sounds, self._rng)
        return self._play(AudioType.STONKS_NOTIFICATION, path, factor)

    def finished(self, request: SoundRequest) -> None:
        """Forget a sound that stopped playing and free its slot."""
        if request not in self.playing:
            return
        self.playing.remove(request)
        if request.limited:
            self.limits.release(request.audio_type)

    def set_channel_volume(self, audio: AudioType, volume: float) -> None:
        """Store the channel volume and apply it to that channel's playing sounds."""
        self.volume.set(audio, volume)
        for request in self.playing:
            if request.audio_type is audio:
                request.volume = volume