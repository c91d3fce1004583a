"""Template banks for the Magic Section.

Keyed independently by zodiac sign, generation and profile so every
combination composes non-empty text. Placeholders: {nama}, {jabatan},
{cabang}, {zodiak}, {trait}, {strongest}, {weakest}.
"""

from __future__ import annotations

from aisg.models.enums import Generation, ProfileTag

ZODIAC_TRAITS: dict[str, dict[str, str]] = {
    "Aries": {"element": "Api", "trait": "berani memulai dan pantang mundur"},
    "Taurus": {"element": "Bumi", "trait": "tekun, sabar, dan konsisten membangun hasil"},
    "Gemini": {"element": "Udara", "trait": "lincah berkomunikasi dan cepat membaca peluang"},
    "Cancer": {"element": "Air", "trait": "peduli dan mampu merangkul tim seperti keluarga"},
    "Leo": {"element": "Api", "trait": "karismatik dan lahir untuk berada di panggung"},
    "Virgo": {"element": "Bumi", "trait": "teliti, rapi, dan perfeksionis dalam eksekusi"},
    "Libra": {"element": "Udara", "trait": "diplomatis dan piawai menjaga keseimbangan tim"},
    "Scorpio": {"element": "Air", "trait": "fokus, intens, dan tajam membaca motif orang"},
    "Sagittarius": {"element": "Api", "trait": "optimis, visioner, dan haus tantangan baru"},
    "Capricorn": {"element": "Bumi", "trait": "disiplin, ambisius, dan sabar mendaki puncak"},
    "Aquarius": {"element": "Udara", "trait": "inovatif dan berani berpikir di luar kebiasaan"},
    "Pisces": {"element": "Air", "trait": "intuitif, empatik, dan kreatif mencari solusi"},
}

ELEMENT_EPITHETS: dict[str, str] = {
    "Api": "Berapi-api",
    "Bumi": "Berpijak Kokoh",
    "Udara": "Penuh Ide",
    "Air": "Berhati Dalam",
}

PROFILE_TITLES: dict[ProfileTag, str] = {
    ProfileTag.LEADER: "Sang Nakhoda",
    ProfileTag.VISIONARY: "Sang Visioner",
    ProfileTag.PERFORMER: "Sang Eksekutor",
    ProfileTag.AT_RISK: "Sang Petarung",
}

PROFILE_NARRATIVES: dict[ProfileTag, str] = {
    ProfileTag.LEADER: (
        "{nama}, sebagai {jabatan} di {cabang} Anda sudah membuktikan diri: angka bicara dan "
        "perilaku Anda menguatkannya. Kekuatan terbesar Anda ada di {strongest}, dan tim "
        "melihat Anda sebagai teladan."
    ),
    ProfileTag.VISIONARY: (
        "{nama}, sebagai {jabatan} di {cabang} Anda punya mesin hasil yang menyala. Angka "
        "kinerja sudah berbicara, kini saatnya perilaku kepemimpinan menyusul, dimulai "
        "dari {weakest}."
    ),
    ProfileTag.PERFORMER: (
        "{nama}, sebagai {jabatan} di {cabang} Anda memiliki fondasi perilaku yang solid. "
        "Tinggal satu langkah: terjemahkan kekuatan {strongest} menjadi angka yang "
        "berbicara lantang di kuartal berikutnya."
    ),
    ProfileTag.AT_RISK: (
        "{nama}, sebagai {jabatan} di {cabang} Anda sedang berada di titik balik. Setiap "
        "juara pernah berada di sini; yang membedakan adalah keputusan untuk bangkit, "
        "dimulai dari {weakest}."
    ),
}

PROFILE_COACHING: dict[ProfileTag, str] = {
    ProfileTag.LEADER: "Gandakan dampak: jadikan {strongest} kurikulum coaching untuk tim Anda.",
    ProfileTag.VISIONARY: "Prioritas coaching: tutup celah {weakest} agar visi Anda diikuti tim.",
    ProfileTag.PERFORMER: "Prioritas coaching: ubah kekuatan perilaku menjadi hasil pada {weakest}.",
    ProfileTag.AT_RISK: "Prioritas coaching: pemulihan cepat pada {weakest} dengan pendampingan mingguan.",
}

PROFILE_QUOTES: dict[ProfileTag, tuple[str, ...]] = {
    ProfileTag.LEADER: (
        "Pemimpin sejati tidak menciptakan pengikut, ia menciptakan pemimpin baru.",
        "Puncak bukan tempat berhenti, melainkan tempat melihat gunung berikutnya.",
    ),
    ProfileTag.VISIONARY: (
        "Visi tanpa eksekusi hanyalah mimpi; eksekusi tanpa visi hanyalah rutinitas.",
        "Langkah besar dimulai dari kebiasaan kecil yang dijaga setiap hari.",
    ),
    ProfileTag.PERFORMER: (
        "Konsistensi mengalahkan intensitas.",
        "Hasil besar adalah akumulasi dari disiplin kecil yang tidak pernah putus.",
    ),
    ProfileTag.AT_RISK: (
        "Jatuh itu biasa, bangkit itu pilihan.",
        "Bukan seberapa keras Anda jatuh, tetapi seberapa cepat Anda bangkit.",
    ),
}

GENERATION_BOOSTERS: dict[Generation, str] = {
    Generation.GEN_Z: (
        "No cap, {zodiak} kayak kamu itu {trait}. Energi main character-nya kerasa banget; "
        "tinggal level up konsistensi biar angkanya ikut viral."
    ),
    Generation.MILLENNIAL: (
        "Sebagai {zodiak} milenial yang {trait}, kamu adalah definisi hustle with purpose. "
        "Work smart, grind hard, dan jangan lupa self-reward setelah target tembus!"
    ),
    Generation.GEN_X: (
        "{zodiak} generasi X seperti Anda {trait}. Pengalaman adalah senjata; saatnya "
        "menjadikannya warisan bagi tim yang lebih muda."
    ),
    Generation.BOOMER: (
        "Seorang {zodiak} berpengalaman yang {trait}. Kebijaksanaan Anda adalah kompas "
        "bagi seluruh cabang; tunjukkan bahwa senioritas berarti keteladanan."
    ),
}

GENERATION_CALLS: dict[Generation, str] = {
    Generation.GEN_Z: "Gas terus, {nama}! Mulai action plan 30 hari hari ini juga.",
    Generation.MILLENNIAL: "{nama}, block kalender Anda sekarang untuk action plan 30 hari pertama.",
    Generation.GEN_X: "{nama}, tetapkan komitmen hari ini dan eksekusi action plan 30 hari dengan disiplin.",
    Generation.BOOMER: "{nama}, pimpin dengan contoh: jalankan action plan 30 hari bersama tim Anda.",
}
