"""Sample save documents shared by the tests."""

# Already in the serializer's layout, so parse + serialize reproduces it byte for byte.
SAVE_XML = """<?xml version="1.0" encoding="utf-8"?>
<SaveGame xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns:xsd="http://www.w3.org/2001/XMLSchema">
  <player>
    <name>Abigail</name>
    <farmName>Sunny</farmName>
    <UniqueMultiplayerID>H1</UniqueMultiplayerID>
    <money>500</money>
    <totalMoneyEarned>12000</totalMoneyEarned>
    <houseUpgradeLevel>0</houseUpgradeLevel>
    <homeLocation>FarmHouse</homeLocation>
    <lastSleepLocation>FarmHouse</lastSleepLocation>
    <eventsSeen>
      <int>60367</int>
      <int>112</int>
    </eventsSeen>
    <mailReceived>
      <string>ccBoilerRoom</string>
      <string>ccBridge</string>
    </mailReceived>
    <yearForSaveGame>2</yearForSaveGame>
    <seasonForSaveGame>1</seasonForSaveGame>
    <dayOfMonthForSaveGame>14</dayOfMonthForSaveGame>
    <millisecondsPlayed>9000000</millisecondsPlayed>
    <stepsTaken xsi:nil="true" />
  </player>
  <locations>
    <GameLocation xsi:type="Farm">
      <name>Farm</name>
      <buildings>
        <Building xsi:type="Cabin">
          <indoors xsi:type="Cabin">
            <farmhandReference>H2</farmhandReference>
          </indoors>
        </Building>
        <Building xsi:type="Cabin">
          <indoors xsi:type="Cabin">
            <farmhandReference>H3</farmhandReference>
          </indoors>
        </Building>
      </buildings>
    </GameLocation>
  </locations>
  <farmhands>
    <Farmer>
      <name>Bob</name>
      <farmName>Sunny</farmName>
      <UniqueMultiplayerID>H2</UniqueMultiplayerID>
      <money>75</money>
      <totalMoneyEarned>800</totalMoneyEarned>
      <houseUpgradeLevel>3</houseUpgradeLevel>
      <homeLocation>Cabin</homeLocation>
      <lastSleepLocation>Cabin</lastSleepLocation>
      <eventsSeen>
        <int>1</int>
      </eventsSeen>
      <mailReceived>
        <string>Beat_PK</string>
      </mailReceived>
      <yearForSaveGame>1</yearForSaveGame>
      <seasonForSaveGame>0</seasonForSaveGame>
      <dayOfMonthForSaveGame>3</dayOfMonthForSaveGame>
      <millisecondsPlayed>120000</millisecondsPlayed>
    </Farmer>
    <Farmer>
      <name />
      <UniqueMultiplayerID>H4</UniqueMultiplayerID>
    </Farmer>
    <Farmer>
      <name>Cara</name>
      <farmName>Sunny</farmName>
      <UniqueMultiplayerID>H3</UniqueMultiplayerID>
      <money>0</money>
      <houseUpgradeLevel>1</houseUpgradeLevel>
      <homeLocation>Cabin2</homeLocation>
    </Farmer>
  </farmhands>
  <mailbox>
    <string>Tom &amp; Jerry&apos;s &lt;b&gt;</string>
  </mailbox>
</SaveGame>
"""

SAVE_INFO_XML = """<?xml version="1.0" encoding="utf-8"?>
<Farmer xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns:xsd="http://www.w3.org/2001/XMLSchema">
  <name>Abigail</name>
  <UniqueMultiplayerID>H1</UniqueMultiplayerID>
  <stepsTaken xsi:nil="true" />
</Farmer>
"""

HOST_ONLY_XML = """<SaveGame>
  <player>
    <name>Solo</name>
    <UniqueMultiplayerID>H9</UniqueMultiplayerID>
  </player>
  <farmhands>
    <Farmer>
      <name></name>
      <UniqueMultiplayerID>H10</UniqueMultiplayerID>
    </Farmer>
  </farmhands>
</SaveGame>
"""

SAVE_NAME = "Sunny_123456"
